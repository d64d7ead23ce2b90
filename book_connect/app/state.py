from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

import streamlit as st

from book_connect.services.pagination import PageCursor
from book_connect.services.surface import Surface
from book_connect.utils.logging import logger
from book_connect.utils.typing import Catalog, Entry

STATE_KEY = "book_connect"


@dataclass
class AppState:
    catalog: Catalog
    matches: List[Entry] = field(default_factory=list)
    cursor: PageCursor = field(default_factory=PageCursor)
    surface: Surface = field(default_factory=Surface.create)
    initialized: bool = False

    @classmethod
    def create(cls, catalog: Catalog) -> "AppState":
        return cls(catalog=catalog, matches=list(catalog.books))

    def replace_matches(self, matches: List[Entry]) -> None:
        # matched set and cursor always move together
        self.matches = list(matches)
        self.cursor.reset()

    @property
    def page_size(self) -> int:
        return self.catalog.page_size

    @property
    def rendered_count(self) -> int:
        return self.cursor.rendered_count(self.matches, self.page_size)


def get_state(catalog: Catalog) -> AppState:
    """Per-session application state, created on first access."""
    state = st.session_state.get(STATE_KEY)
    if state is None:
        logger.info("Initializing session state")
        state = AppState.create(catalog)
        st.session_state[STATE_KEY] = state
    return state
