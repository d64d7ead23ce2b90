from book_connect.components import search_overlay

def test_submitted_values_survive_hidden_overlay():
    session = {"search-title": "dune", "search-genre": "sf", "search-author": "any"}
    search_overlay.remember_fields(session)

    # Streamlit drops widget keys for widgets not drawn in a run
    for key in search_overlay.FIELDS.values():
        del session[key]
    search_overlay.restore_fields(session)

    assert search_overlay.form_values(session) == {"title": "dune", "genre": "sf", "author": "any"}

def test_restore_keeps_live_widget_values():
    session = {"last-search-title": "dune", "search-title": "earthsea"}
    search_overlay.restore_fields(session)
    assert session["search-title"] == "earthsea"
    assert "search-genre" not in session

def test_first_open_leaves_fields_unset():
    session = {}
    search_overlay.restore_fields(session)
    assert search_overlay.form_values(session) == {"title": None, "genre": None, "author": None}
