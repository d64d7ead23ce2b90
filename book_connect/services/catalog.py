from __future__ import annotations
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from book_connect.utils.errors import CatalogError
from book_connect.utils.io import read_document
from book_connect.utils.logging import logger
from book_connect.utils.typing import Catalog, Entry

BOOKS_PER_PAGE = 36

_REQUIRED = ("id", "title", "author", "image", "description", "published")

def _parse_published(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise CatalogError(f"Invalid published date: {value!r}")

def _parse_entry(raw: Dict[str, Any]) -> Entry:
    missing = [k for k in _REQUIRED if k not in raw]
    if missing:
        raise CatalogError(f"Book {raw.get('id', '?')!r} is missing fields: {', '.join(missing)}")
    return Entry(
        id=str(raw["id"]),
        title=str(raw["title"]),
        author=str(raw["author"]),
        image=str(raw["image"]),
        description=str(raw["description"]),
        published=_parse_published(raw["published"]),
        genres=frozenset(str(g) for g in raw.get("genres") or []),
    )

def _mapping(data: Dict[str, Any], key: str) -> Dict[str, str]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise CatalogError(f"'{key}' must be a mapping of key -> display name")
    return {str(k): str(v) for k, v in value.items()}

def build_catalog(data: Dict[str, Any], page_size: Optional[int] = None) -> Catalog:
    if not isinstance(data, dict):
        raise CatalogError("Catalog document must be a mapping")
    raw_books = data.get("books") or []
    if not isinstance(raw_books, list):
        raise CatalogError("'books' must be a list")
    books: List[Entry] = [_parse_entry(b) for b in raw_books]

    ids = [b.id for b in books]
    if len(ids) != len(set(ids)):
        raise CatalogError("Book ids must be unique")

    size = page_size or int(data.get("books_per_page") or BOOKS_PER_PAGE)
    if size < 1:
        raise CatalogError(f"Page size must be positive, got {size}")
    return Catalog(
        books=tuple(books),
        authors=_mapping(data, "authors"),
        genres=_mapping(data, "genres"),
        page_size=size,
    )

def load_catalog(path: Path, page_size: Optional[int] = None) -> Catalog:
    data = read_document(Path(path), default=None)
    if data is None:
        raise CatalogError(f"Catalog source not found: {path}")
    catalog = build_catalog(data, page_size=page_size)
    logger.info("catalog.load: %d books, %d authors, %d genres from %s",
                len(catalog.books), len(catalog.authors), len(catalog.genres), path)
    return catalog
