"""Pagination - in-memory page slicing over a fully fetched, ordered result set.

Invariants:
    - page is 1-based; page N returns items [(N-1)*limit, N*limit)
    - total_pages == ceil(total / limit) (0 for an empty set)
    - has_next / has_prev derived from the slice bounds, not from total_pages
"""

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page:
    items: list
    total: int
    current_page: int
    total_pages: int
    has_next: bool
    has_prev: bool

    def pagination(self) -> dict:
        """Wire shape of the pagination block."""
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


def paginate(items: Sequence[T], page: int, limit: int) -> Page:
    """Slice items for the requested page."""
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    start = (page - 1) * limit
    end = page * limit
    total = len(items)
    return Page(
        items=list(items[start:end]),
        total=total,
        current_page=page,
        total_pages=math.ceil(total / limit),
        has_next=end < total,
        has_prev=start > 0,
    )
