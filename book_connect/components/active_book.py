import html
from urllib.parse import quote

import streamlit as st

from book_connect.app import routing
from book_connect.app.state import AppState
from book_connect.utils.errors import ui_error_boundary

def blur_markup(src: str) -> str:
    # percent-encode first so no quote can end url(), then escape for the attribute
    url = html.escape(quote(src, safe=":/?&=%#"), quote=True)
    return f'<div class="bc-blur" style="background-image:url(\'{url}\')"></div>'

@ui_error_boundary
def render(state: AppState) -> None:
    surface = state.surface
    if not surface.query("list-active").open:
        return

    with st.container(border=True):
        blur = surface.query("list-blur").src
        if blur:
            st.markdown(blur_markup(blur), unsafe_allow_html=True)
        image_col, text_col = st.columns([1, 2])
        with image_col:
            image = surface.query("list-image").src
            if image:
                st.image(image)
        with text_col:
            st.subheader(surface.query("list-title").text)
            st.caption(surface.query("list-subtitle").text)
            st.write(surface.query("list-description").text)
        st.button("Close", key="list-close", on_click=routing.close_active, args=(state,))
