import streamlit as st

from book_connect.app import routing
from book_connect.app.state import AppState
from book_connect.services.theme import THEMES
from book_connect.utils.errors import ui_error_boundary

THEME_LABELS = {"day": "Day", "night": "Night"}

def _submit(state: AppState) -> None:
    routing.handle_settings_submit(state, {"theme": st.session_state.get("settings-theme")})

@ui_error_boundary
def render(state: AppState) -> None:
    surface = state.surface
    if not surface.query("settings-overlay").open:
        return

    # keep the control in sync with the applied theme
    st.session_state["settings-theme"] = surface.query("settings-theme").value or THEMES[0]
    with st.form("settings-form"):
        st.selectbox("Theme", options=list(THEMES), format_func=THEME_LABELS.get, key="settings-theme")
        save_col, cancel_col = st.columns(2)
        with save_col:
            st.form_submit_button("Save", type="primary", on_click=_submit, args=(state,))
        with cancel_col:
            st.form_submit_button("Cancel", on_click=routing.close_settings, args=(state,))
