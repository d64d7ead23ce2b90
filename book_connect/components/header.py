import streamlit as st

from book_connect.app import routing
from book_connect.app.state import AppState
from book_connect.services.theme import palette_css

_CSS = """
<style>
.stApp{background:rgb(var(--color-light));color:rgb(var(--color-dark))}
.stApp h1,.stApp h2,.stApp h3,.stApp p,.stApp label{color:rgb(var(--color-dark))}
.bc-header{border-bottom:1px solid rgba(var(--color-dark),0.15);padding:8px 0 12px;margin-bottom:12px}
.bc-header h1{margin:0;font-weight:700}
.bc-blur{height:140px;background-size:cover;background-position:center;filter:blur(12px);opacity:0.5;border-radius:8px}
</style>
"""

def render(state: AppState) -> None:
    st.markdown(palette_css(state.surface.style), unsafe_allow_html=True)
    st.markdown(_CSS, unsafe_allow_html=True)

    title_col, search_col, settings_col = st.columns([6, 1, 1])
    with title_col:
        st.markdown('<div class="bc-header"><h1>📚 Book Connect</h1></div>', unsafe_allow_html=True)
    with search_col:
        st.button("🔍 Search", key="header-search", on_click=routing.open_search, args=(state,))
    with settings_col:
        st.button("⚙️ Settings", key="header-settings", on_click=routing.open_settings, args=(state,))
