import json

import streamlit as st
import streamlit.components.v1 as components

from book_connect.app.state import AppState
from book_connect.components import active_book, book_list, header, search_overlay, settings_overlay
from book_connect.utils.errors import ui_error_boundary

_SCROLL_TOP = "<script>window.parent.scrollTo({top: 0, behavior: 'smooth'});</script>"
_FOCUS = (
    "<script>const el = window.parent.document.querySelector('input[aria-label=%s]');"
    "if (el) { el.focus(); }</script>"
)
FOCUS_LABELS = {"search-title": "Title"}

def _run_surface_requests(state: AppState) -> None:
    # one-shot requests left by the handlers
    surface = state.surface
    if surface.scroll_to_top:
        components.html(_SCROLL_TOP, height=0)
        surface.scroll_to_top = False
    if surface.focus:
        label = FOCUS_LABELS.get(surface.focus)
        if label:
            components.html(_FOCUS % json.dumps(label), height=0)
        surface.focus = None

@ui_error_boundary
def render(state: AppState) -> None:
    header.render(state)
    search_overlay.render(state)
    settings_overlay.render(state)
    active_book.render(state)
    book_list.render(state)
    _run_surface_requests(state)
