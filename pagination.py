# pagination.py
"""Windowed page-selector layout for a result listing.

The layout never holds more than seven page/ellipsis entries, whatever the
number of pages:

    total <= 1          nothing
    total <= 5          1 2 3 4 5
    current in {1, 2}   1 2 3 ... N
    current in {N-1, N} 1 ... N-2 N-1 N
    current == 3        1 2 3 4 ... N
    current == N-2      1 ... N-3 N-2 N-1 N
    otherwise           1 ... P-1 P P+1 ... N
"""
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

PAGE = "page"
ELLIPSIS = "ellipsis"
PREV = "prev"
NEXT = "next"

MAX_SIMPLE_PAGES = 5


@dataclass(frozen=True)
class PageEntry:
    """One control in the pagination bar.

    ``number`` is the page the control leads to; ellipses have none.
    """
    kind: str
    number: Optional[int] = None
    is_active: bool = False
    is_disabled: bool = False

    @property
    def is_interactive(self) -> bool:
        return self.number is not None and not self.is_disabled and not self.is_active

    @property
    def label(self) -> str:
        if self.kind == ELLIPSIS:
            return "..."
        if self.kind == PREV:
            return "‹"
        if self.kind == NEXT:
            return "›"
        return str(self.number)


@dataclass(frozen=True)
class PaginationPlan:
    current: int
    total: int
    pages: Tuple[PageEntry, ...] = ()
    prev: Optional[PageEntry] = None
    next: Optional[PageEntry] = None

    @property
    def controls(self) -> Tuple[PageEntry, ...]:
        """Prev, the windowed pages, then Next; empty when there is nothing to page."""
        if not self.pages:
            return ()
        return (self.prev,) + self.pages + (self.next,)

    def __iter__(self) -> Iterator[PageEntry]:
        return iter(self.controls)

    def __len__(self) -> int:
        return len(self.controls)


def total_pages(total_results: int, page_size: int = 10) -> int:
    if total_results <= 0:
        return 0
    return math.ceil(total_results / page_size)


def _window(current: int, total: int) -> Tuple[Optional[int], ...]:
    """Page numbers to show, with None standing in for an ellipsis."""
    if total <= MAX_SIMPLE_PAGES:
        return tuple(range(1, total + 1))
    if current in (1, 2):
        return (1, 2, 3, None, total)
    if current in (total - 1, total):
        return (1, None, total - 2, total - 1, total)
    if current == 3:
        return (1, 2, 3, 4, None, total)
    if current == total - 2:
        return (1, None, total - 3, total - 2, total - 1, total)
    return (1, None, current - 1, current, current + 1, None, total)


def plan(current: int, total: int) -> PaginationPlan:
    """Lays out the pagination bar for ``current`` of ``total`` pages."""
    if total <= 1:
        return PaginationPlan(current=max(current, 1), total=max(total, 0))

    current = min(max(current, 1), total)
    pages = tuple(
        PageEntry(ELLIPSIS) if number is None
        else PageEntry(PAGE, number, is_active=number == current)
        for number in _window(current, total)
    )
    return PaginationPlan(
        current=current,
        total=total,
        pages=pages,
        prev=PageEntry(PREV, current - 1 if current > 1 else None, is_disabled=current == 1),
        next=PageEntry(NEXT, current + 1 if current < total else None, is_disabled=current == total),
    )
