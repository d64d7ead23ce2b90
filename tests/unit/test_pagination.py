from book_connect.services.pagination import PageCursor, remaining_count

def test_current_slice_after_reset():
    cursor = PageCursor(page=4)
    cursor.reset()
    assert cursor.page == 1
    assert cursor.current_slice(list(range(5)), 2) == (0, 2)
    assert cursor.current_slice(list(range(1)), 2) == (0, 1)

def test_windows_cover_without_overlap():
    matched = list(range(10))
    cursor = PageCursor()
    windows = [cursor.current_slice(matched, 3)]
    windows += [cursor.advance(matched, 3) for _ in range(2)]
    assert windows == [(0, 3), (3, 6), (6, 9)]
    covered = set()
    for start, end in windows:
        assert covered.isdisjoint(range(start, end))
        covered.update(range(start, end))
    assert covered == set(range(9))
    assert cursor.page == 3

def test_advance_past_end_is_empty():
    matched = list(range(5))
    cursor = PageCursor()
    assert cursor.advance(matched, 2) == (2, 4)
    assert cursor.advance(matched, 2) == (4, 5)
    start, end = cursor.advance(matched, 2)
    assert matched[start:end] == []
    assert cursor.rendered_count(matched, 2) == 5

def test_remaining_count_never_negative():
    assert remaining_count(40, 36) == 4
    assert remaining_count(3, 36) == 0
