from book_connect.services.filters import apply_filters
from book_connect.utils.typing import FilterCriteria

def ids(entries):
    return [e.id for e in entries]

def test_empty_criteria_returns_full_catalog_in_order(catalog):
    result = apply_filters(FilterCriteria(title="", author="any", genre="any"), catalog.books)
    assert ids(result) == ["1", "2", "3", "4", "5"]

def test_title_is_case_insensitive_substring(catalog):
    result = apply_filters(FilterCriteria(title="DUNE"), catalog.books)
    assert ids(result) == ["1", "2"]
    assert result[1].title == "Dune Messiah"

def test_blank_title_is_no_constraint(catalog):
    assert len(apply_filters(FilterCriteria(title="   "), catalog.books)) == 5

def test_title_is_trimmed(catalog):
    assert ids(apply_filters(FilterCriteria(title="  messiah "), catalog.books)) == ["2"]

def test_author_and_genre_combine_with_and(catalog):
    result = apply_filters(FilterCriteria(author="leguin", genre="sf"), catalog.books)
    assert ids(result) == ["4"]

def test_genre_membership(catalog):
    assert ids(apply_filters(FilterCriteria(genre="classic"), catalog.books)) == ["1", "5"]

def test_no_match_is_empty(catalog):
    assert apply_filters(FilterCriteria(title="zzz"), catalog.books) == []

def test_result_is_ordered_subsequence_and_idempotent(catalog):
    criteria = FilterCriteria(title="e", genre="sf")
    first = apply_filters(criteria, catalog.books)
    second = apply_filters(criteria, catalog.books)
    assert first == second
    positions = [catalog.books.index(e) for e in first]
    assert positions == sorted(positions)
    for e in first:
        assert "e" in e.title.lower() and "sf" in e.genres

def test_from_form_defaults_missing_fields():
    criteria = FilterCriteria.from_form({"title": None})
    assert criteria == FilterCriteria(title="", author="any", genre="any")
