from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

Window = Tuple[int, int]


def remaining_count(total: int, shown: int) -> int:
    """Label count for the show-more button: items beyond the ones already shown."""
    return max(total - shown, 0)


@dataclass
class PageCursor:
    """Number of pages of the current matched set already rendered."""
    page: int = 1

    def reset(self) -> None:
        self.page = 1

    def current_slice(self, matched: Sequence, page_size: int) -> Window:
        return 0, min(self.page * page_size, len(matched))

    def advance(self, matched: Sequence, page_size: int) -> Window:
        total = len(matched)
        start = min(self.page * page_size, total)
        end = min((self.page + 1) * page_size, total)
        self.page += 1
        return start, end

    def rendered_count(self, matched: Sequence, page_size: int) -> int:
        return min(self.page * page_size, len(matched))
