"""
Book Connect - catalog browser entry point
"""
import os, sys
import streamlit as st

# Ensure package imports resolve when running via 'streamlit run book_connect/app/main.py'
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from book_connect.utils import errors, logging as app_logging  # noqa: E402
from book_connect.app import routing, state  # noqa: E402
from book_connect.services import config, theme  # noqa: E402
from book_connect.services.catalog import load_catalog  # noqa: E402
from book_connect.utils.typing import Catalog  # noqa: E402
from book_connect.views import catalog as catalog_view  # noqa: E402

def configure_page() -> None:
    st.set_page_config(
        page_title="Book Connect",
        page_icon="📚",
        layout="wide",
    )

@st.cache_resource
def get_catalog(path: str, page_size) -> Catalog:
    return load_catalog(path, page_size=page_size)

@errors.ui_error_boundary
def main() -> None:
    configure_page()
    settings = config.load_settings()
    app_logging.init(settings.log_dir, settings.log_level)

    try:
        catalog = get_catalog(str(settings.catalog_path), settings.page_size)
    except errors.BookConnectError as e:
        errors.handle_fatal(e)
        return

    app_state = state.get_state(catalog)
    routing.initialize(app_state, prefers_dark=theme.streamlit_prefers_dark)
    catalog_view.render(app_state)

if __name__ == "__main__":
    main()
