from book_connect.services import render
from book_connect.services.surface import Surface

def test_option_list_keeps_mapping_order():
    items = render.render_option_list({"b": "Beta", "a": "Alpha"}, "All Things")
    assert [(i.value, i.label) for i in items] == [("any", "All Things"), ("b", "Beta"), ("a", "Alpha")]

def test_render_entries_tags_each_preview(catalog):
    surface = Surface.create()
    previews = render.render_entries(surface, catalog.books[:2], catalog.authors)
    assert [(p.handle, p.author, p.author_name) for p in previews] == [
        ("1", "herbert", "Frank Herbert"),
        ("2", "herbert", "Frank Herbert"),
    ]
    render.render_entries(surface, catalog.books[2:3], catalog.authors)
    assert len(surface.query("list-items").children) == 3
    render.clear_entries(surface)
    assert surface.query("list-items").children == []

def test_unknown_author_falls_back_to_key(catalog):
    surface = Surface.create()
    preview = render.create_book_element(catalog.books[0], {})
    assert preview.author_name == "herbert"
    render.render_detail_overlay(surface, catalog.books[0], {})
    assert surface.query("list-subtitle").text == "herbert (1965)"

def test_show_more_label():
    surface = Surface.create()
    render.update_show_more_button(surface, 40, 36)
    assert surface.query("list-button").text == "Show more (4)"
