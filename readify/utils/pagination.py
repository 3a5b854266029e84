"""Offset/limit windows for page-numbered listings."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PageRef:
    page: int
    limit: int


@dataclass(frozen=True)
class PaginationWindow:
    page: int
    limit: int
    total_count: int
    start_index: int
    end_index: int
    previous: Optional[PageRef] = None
    next: Optional[PageRef] = None


def paginate_results(page: int, limit: int, total_count: int) -> PaginationWindow:
    """Compute the window for a 1-based `page` of `limit` items out of `total_count`.

    `start_index` is the offset of the first item on the page and `end_index`
    the exclusive end of the page; `end_index` is not clamped to `total_count`,
    so a page past the last item simply selects nothing.

    Raises:
        ValueError: if page < 1, limit < 1 or total_count < 0.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    if total_count < 0:
        raise ValueError(f"total_count must be >= 0, got {total_count}")

    start_index = (page - 1) * limit
    end_index = page * limit

    previous = PageRef(page=page - 1, limit=limit) if start_index > 0 else None
    next_page = PageRef(page=page + 1, limit=limit) if end_index < total_count else None

    return PaginationWindow(
        page=page,
        limit=limit,
        total_count=total_count,
        start_index=start_index,
        end_index=end_index,
        previous=previous,
        next=next_page,
    )
