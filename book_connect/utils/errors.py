import functools, traceback
import streamlit as st
from book_connect.utils.logging import logger

class BookConnectError(Exception): ...
class CatalogError(BookConnectError): ...
class MountPointError(BookConnectError): ...
class ValidationError(BookConnectError): ...

def component_name(fn) -> str:
    """'book_connect.components.book_list' -> 'book list'"""
    return fn.__module__.rsplit(".", 1)[-1].replace("_", " ")

def ui_error_boundary(fn):
    name = component_name(fn)

    @functools.wraps(fn)
    def _wrap(*a, **k):
        try:
            return fn(*a, **k)
        except Exception as e:
            logger.error("UI error in %s.%s: %s", name, fn.__name__, e, exc_info=True)
            st.error(f"The {name} could not be displayed: {e}")
            with st.expander(f"Error details ({name})"):
                st.code("".join(traceback.format_exception(type(e), e, e.__traceback__)))
    return _wrap

def handle_fatal(e: Exception) -> None:
    logger.critical("Fatal error: %s", e, exc_info=True)
    st.error(f"Book Connect cannot start: {e}")
    st.stop()
