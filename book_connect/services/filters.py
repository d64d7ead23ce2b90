from typing import Iterable, List

from book_connect.utils.typing import ANY, Entry, FilterCriteria


def _title_matches(entry: Entry, title: str) -> bool:
    needle = title.strip()
    return needle == "" or needle.lower() in entry.title.lower()


def apply_filters(criteria: FilterCriteria, catalog: Iterable[Entry]) -> List[Entry]:
    """Return the entries passing title, author and genre constraints, in catalog order."""
    return [
        entry
        for entry in catalog
        if _title_matches(entry, criteria.title)
        and (criteria.author == ANY or entry.author == criteria.author)
        and (criteria.genre == ANY or criteria.genre in entry.genres)
    ]
