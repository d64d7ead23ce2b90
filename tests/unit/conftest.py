from typing import Dict, List, Optional

import pytest

from book_connect.services.catalog import build_catalog
from book_connect.utils.typing import Catalog

AUTHORS = {"herbert": "Frank Herbert", "leguin": "Ursula K. Le Guin", "butler": "Octavia E. Butler"}
GENRES = {"sf": "Science Fiction", "fantasy": "Fantasy", "classic": "Classics"}

def book(book_id: str, title: str, author: str, genres: List[str], published: str = "1965-08-01T00:00:00.000Z") -> Dict:
    return {
        "id": book_id,
        "title": title,
        "author": author,
        "genres": genres,
        "image": f"https://img.example/{book_id}.jpg",
        "published": published,
        "description": f"About {title}",
    }

BOOKS = [
    book("1", "Dune", "herbert", ["sf", "classic"]),
    book("2", "Dune Messiah", "herbert", ["sf"], "1969-10-15T00:00:00.000Z"),
    book("3", "A Wizard of Earthsea", "leguin", ["fantasy"], "1968-11-01T00:00:00.000Z"),
    book("4", "The Dispossessed", "leguin", ["sf"], "1974-05-01T00:00:00.000Z"),
    book("5", "Kindred", "butler", ["sf", "classic"], "1979-06-01T00:00:00.000Z"),
]

def make_catalog(books: Optional[List[Dict]] = None, page_size: int = 2) -> Catalog:
    return build_catalog(
        {"books": BOOKS if books is None else books, "authors": AUTHORS, "genres": GENRES},
        page_size=page_size,
    )

@pytest.fixture
def catalog() -> Catalog:
    return make_catalog()
