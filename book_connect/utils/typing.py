from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

ANY = "any"

RGB = Tuple[int, int, int]

@dataclass(frozen=True)
class Entry:
    id: str
    title: str
    author: str
    image: str
    description: str
    published: date
    genres: FrozenSet[str] = frozenset()

@dataclass(frozen=True)
class Catalog:
    books: Tuple[Entry, ...]
    authors: Dict[str, str]
    genres: Dict[str, str]
    page_size: int

    def find(self, entry_id: str) -> Optional[Entry]:
        return next((book for book in self.books if book.id == entry_id), None)

@dataclass(frozen=True)
class FilterCriteria:
    title: str = ""
    author: str = ANY
    genre: str = ANY

    @classmethod
    def from_form(cls, form: Mapping[str, Optional[str]]) -> "FilterCriteria":
        # missing or blank select values mean "match anything"
        return cls(
            title=form.get("title") or "",
            author=form.get("author") or ANY,
            genre=form.get("genre") or ANY,
        )

@dataclass(frozen=True)
class ThemePalette:
    dark_color: RGB
    light_color: RGB

@dataclass(frozen=True)
class BookPreview:
    author: str
    author_name: str
    id: str
    image: str
    title: str
    handle: str  # entry id, resolved on click

@dataclass(frozen=True)
class OptionItem:
    value: str
    label: str

