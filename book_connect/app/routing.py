"""
Interaction handlers: one per external trigger. Each handler takes the
session's AppState explicitly and leaves matches, cursor and surface
consistent before returning.
"""
from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional

from book_connect.app.state import AppState
from book_connect.services import render, theme
from book_connect.services.filters import apply_filters
from book_connect.utils.logging import logger
from book_connect.utils.typing import FilterCriteria


def _draw_first_page(state: AppState) -> None:
    start, end = state.cursor.current_slice(state.matches, state.page_size)
    render.render_entries(state.surface, state.matches[start:end], state.catalog.authors)


def _refresh_show_more(state: AppState) -> None:
    render.update_show_more_button(state.surface, len(state.matches), state.rendered_count)


def initialize(state: AppState, prefers_dark: Optional[theme.PreferenceFn] = None) -> None:
    if state.initialized:
        return
    _draw_first_page(state)
    render.create_option_lists(state.surface, state.catalog.genres, state.catalog.authors)
    selected = theme.detect_theme(prefers_dark)
    theme.apply_palette(state.surface, theme.derive_colors(selected), selected)
    _refresh_show_more(state)
    state.initialized = True
    logger.info("routing.initialize: %d books, page size %d", len(state.matches), state.page_size)


def handle_search_submit(state: AppState, form: Mapping[str, Optional[str]]) -> None:
    criteria = FilterCriteria.from_form(form)
    result = apply_filters(criteria, state.catalog.books)
    logger.info("routing.search: %s -> %d matches", criteria, len(result))

    state.replace_matches(result)
    render.toggle_list_message(state.surface, len(result) < 1)
    render.clear_entries(state.surface)
    _draw_first_page(state)
    _refresh_show_more(state)

    state.surface.scroll_to_top = True
    state.surface.query("search-overlay").open = False


def handle_settings_submit(state: AppState, form: Mapping[str, Optional[str]]) -> None:
    selected = form.get("theme") or theme.DEFAULT_THEME
    theme.apply_palette(state.surface, theme.derive_colors(selected), selected)
    state.surface.query("settings-overlay").open = False


def handle_show_more(state: AppState) -> None:
    start, end = state.cursor.advance(state.matches, state.page_size)
    logger.debug("routing.show_more: window [%d, %d)", start, end)
    render.render_entries(state.surface, state.matches[start:end], state.catalog.authors)
    _refresh_show_more(state)


def find_preview_handle(path: Iterable[Any]) -> Optional[str]:
    """First `preview` tag along an element path, innermost element first."""
    for node in path:
        dataset = getattr(node, "dataset", None)
        if dataset is None and isinstance(node, Mapping):
            dataset = node.get("dataset")
        if isinstance(dataset, Mapping) and dataset.get("preview"):
            return dataset["preview"]
    return None


def handle_list_item_click(state: AppState, handle: Optional[str]) -> bool:
    if not handle:
        return False
    active = state.catalog.find(handle)
    if active is None:
        logger.debug("routing.click: no book with id %s", handle)
        return False
    render.render_detail_overlay(state.surface, active, state.catalog.authors)
    return True


def open_search(state: AppState) -> None:
    state.surface.query("search-overlay").open = True
    state.surface.focus = "search-title"


def close_search(state: AppState) -> None:
    state.surface.query("search-overlay").open = False


def open_settings(state: AppState) -> None:
    state.surface.query("settings-overlay").open = True


def close_settings(state: AppState) -> None:
    state.surface.query("settings-overlay").open = False


def close_active(state: AppState) -> None:
    state.surface.query("list-active").open = False
