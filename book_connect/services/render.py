from __future__ import annotations
from typing import List, Mapping, Sequence

from book_connect.services.surface import Surface
from book_connect.services.pagination import remaining_count
from book_connect.utils.logging import logger
from book_connect.utils.typing import ANY, BookPreview, Entry, OptionItem

LIST_ITEMS = "list-items"
MESSAGE_SHOW = "list__message_show"


def create_book_element(entry: Entry, authors: Mapping[str, str]) -> BookPreview:
    return BookPreview(
        author=entry.author,
        author_name=authors.get(entry.author, entry.author),
        id=entry.id,
        image=entry.image,
        title=entry.title,
        handle=entry.id,
    )


def render_entries(surface: Surface, entries: Sequence[Entry], authors: Mapping[str, str]) -> List[BookPreview]:
    """Append one preview per entry to the list mount; existing previews are kept."""
    previews = [create_book_element(e, authors) for e in entries]
    surface.query(LIST_ITEMS).append(previews)
    logger.debug("render.entries: +%d (total %d)", len(previews), len(surface.query(LIST_ITEMS).children))
    return previews


def clear_entries(surface: Surface) -> None:
    surface.query(LIST_ITEMS).clear()


def render_option_list(mapping: Mapping[str, str], all_label: str) -> List[OptionItem]:
    return [OptionItem(ANY, all_label)] + [OptionItem(key, name) for key, name in mapping.items()]


def create_option_lists(surface: Surface, genres: Mapping[str, str], authors: Mapping[str, str]) -> None:
    surface.query("search-genres").append(render_option_list(genres, "All Genres"))
    surface.query("search-authors").append(render_option_list(authors, "All Authors"))


def render_detail_overlay(surface: Surface, entry: Entry, authors: Mapping[str, str]) -> None:
    surface.query("list-blur").src = entry.image
    surface.query("list-image").src = entry.image
    surface.query("list-title").text = entry.title
    surface.query("list-subtitle").text = f"{authors.get(entry.author, entry.author)} ({entry.published.year})"
    surface.query("list-description").text = entry.description
    surface.query("list-active").open = True


def toggle_list_message(surface: Surface, show: bool) -> None:
    surface.query("list-message").toggle_class(MESSAGE_SHOW, show)


def update_show_more_button(surface: Surface, total: int, shown: int) -> None:
    surface.query("list-button").text = f"Show more ({remaining_count(total, shown)})"
