"""
Page slicing over ranked results.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..config import MAX_PAGE_SIZE
from ..errors import PaginationError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of a ranked sequence with its totals."""

    items: tuple[T, ...]
    page: int
    page_size: int
    total_count: int
    total_pages: int


def total_pages(total_count: int, page_size: int) -> int:
    if total_count <= 0:
        return 0
    return math.ceil(total_count / page_size)


def check_page_bounds(page: int, page_size: int, *, max_page_size: int = MAX_PAGE_SIZE) -> None:
    """Raise PaginationError unless page >= 1 and page_size is in [1, max_page_size]."""
    if page < 1:
        raise PaginationError(f"Page must be at least 1, got {page}")
    if not 1 <= page_size <= max_page_size:
        raise PaginationError(
            f"Page size must be between 1 and {max_page_size}, got {page_size}"
        )


def paginate(
    items: Sequence[T],
    *,
    page: int,
    page_size: int,
    max_page_size: int = MAX_PAGE_SIZE,
) -> Page[T]:
    """Return the 1-based ``page`` of ``items``; past the end yields an empty page."""
    check_page_bounds(page, page_size, max_page_size=max_page_size)

    offset = (page - 1) * page_size
    return Page(
        items=tuple(items[offset : offset + page_size]),
        page=page,
        page_size=page_size,
        total_count=len(items),
        total_pages=total_pages(len(items), page_size),
    )
