from __future__ import annotations
from typing import List

import streamlit as st

from book_connect.app import routing
from book_connect.app.state import AppState
from book_connect.services.render import MESSAGE_SHOW
from book_connect.utils.errors import ui_error_boundary
from book_connect.utils.typing import BookPreview

COLUMNS = 3

@ui_error_boundary
def render(state: AppState) -> None:
    surface = state.surface
    previews: List[BookPreview] = surface.query("list-items").children

    cols = st.columns(COLUMNS)
    for i, preview in enumerate(previews):
        with cols[i % COLUMNS]:
            _render_preview(state, preview, i)

    if MESSAGE_SHOW in surface.query("list-message").classes:
        st.info("No results found. Your filters might be too narrow.")

    st.button(
        surface.query("list-button").text or "Show more",
        key="list-button",
        on_click=routing.handle_show_more,
        args=(state,),
    )

def _render_preview(state: AppState, preview: BookPreview, index: int) -> None:
    with st.container(border=True):
        if preview.image:
            st.image(preview.image)
        st.markdown(f"**{preview.title}**")
        st.caption(preview.author_name)
        # the entry id travels with the button, so the click resolves it directly
        st.button(
            "Preview",
            key=f"preview_{preview.handle}_{index}",
            on_click=routing.handle_list_item_click,
            args=(state, preview.handle),
        )
