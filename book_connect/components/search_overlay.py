from __future__ import annotations
from typing import Dict, List, MutableMapping

import streamlit as st

from book_connect.app import routing
from book_connect.app.state import AppState
from book_connect.utils.errors import ui_error_boundary
from book_connect.utils.typing import OptionItem

FIELDS = {"title": "search-title", "genre": "search-genre", "author": "search-author"}
# widget keys are dropped while the overlay is hidden; these survive
REMEMBERED = {name: f"last-{key}" for name, key in FIELDS.items()}

def form_values(session: MutableMapping) -> Dict[str, str]:
    return {name: session.get(key) for name, key in FIELDS.items()}

def remember_fields(session: MutableMapping) -> None:
    for name, value in form_values(session).items():
        session[REMEMBERED[name]] = value

def restore_fields(session: MutableMapping) -> None:
    for name, key in FIELDS.items():
        if key not in session and session.get(REMEMBERED[name]) is not None:
            session[key] = session[REMEMBERED[name]]

def _submit(state: AppState) -> None:
    remember_fields(st.session_state)
    routing.handle_search_submit(state, form_values(st.session_state))

def _cancel(state: AppState) -> None:
    remember_fields(st.session_state)
    routing.close_search(state)

def _select(label: str, options: List[OptionItem], key: str) -> None:
    labels = {o.value: o.label for o in options}
    st.selectbox(label, options=list(labels), format_func=labels.get, key=key)

@ui_error_boundary
def render(state: AppState) -> None:
    surface = state.surface
    if not surface.query("search-overlay").open:
        return

    restore_fields(st.session_state)
    with st.form("search-form"):
        st.text_input("Title", key=FIELDS["title"], placeholder="Any")
        _select("Genre", surface.query("search-genres").children, FIELDS["genre"])
        _select("Author", surface.query("search-authors").children, FIELDS["author"])

        search_col, cancel_col = st.columns(2)
        with search_col:
            st.form_submit_button("Search", type="primary", on_click=_submit, args=(state,))
        with cancel_col:
            st.form_submit_button("Cancel", on_click=_cancel, args=(state,))
