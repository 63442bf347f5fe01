from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from hr_datatable.config import PAGE_SIZE_OPTIONS
from hr_datatable.exceptions import InvalidPageSizeError

ELLIPSIS = "..."
PageLabel = Union[int, str]


@dataclass
class PaginationState:
    page_index: int = 0
    page_size: int = 10

    @property
    def start(self) -> int:
        return self.page_index * self.page_size


def page_count(total_rows: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return (total_rows + page_size - 1) // page_size


def last_page_index(total_rows: int, page_size: int) -> int:
    return max(page_count(total_rows, page_size) - 1, 0)


def page_slice(rows: Sequence[Any], state: PaginationState) -> list[Any]:
    return list(rows[state.start : state.start + state.page_size])


def goto_page(state: PaginationState, page_index: int, total_rows: int) -> PaginationState:
    state.page_index = min(max(0, page_index), last_page_index(total_rows, state.page_size))
    return state


def next_page(state: PaginationState, total_rows: int) -> PaginationState:
    return goto_page(state, state.page_index + 1, total_rows)


def prev_page(state: PaginationState, total_rows: int) -> PaginationState:
    return goto_page(state, state.page_index - 1, total_rows)


def change_page_size(
    state: PaginationState,
    page_size: int,
    total_rows: int,
    options: Sequence[int] = PAGE_SIZE_OPTIONS,
) -> PaginationState:
    if page_size not in options:
        raise InvalidPageSizeError(
            code="INVALID_PAGE_SIZE",
            message=f"Page size must be one of {list(options)}",
            details={"page_size": page_size},
        )
    # Keep the first row of the current page on screen.
    top_row = state.start
    state.page_size = page_size
    state.page_index = top_row // page_size
    return goto_page(state, state.page_index, total_rows)


def can_previous(state: PaginationState) -> bool:
    return state.page_index > 0


def can_next(state: PaginationState, total_rows: int) -> bool:
    return state.page_index + 1 < page_count(total_rows, state.page_size)


def page_numbers(current_page_index: int, total_pages: int) -> list[PageLabel]:
    """Compact page-button labels around the current page.

    >>> page_numbers(9, 20)
    [1, '...', 8, 9, 10, 11, 12, '...', 20]
    """
    current = current_page_index + 1
    start = max(1, current - 2)
    end = min(total_pages, current + 2)

    pages: list[PageLabel] = []
    if start > 1:
        pages.append(1)
    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(ELLIPSIS)
    if end < total_pages:
        pages.append(total_pages)
    return pages


def jump_candidates(total_pages: int, query: str = "") -> list[int]:
    needle = query.strip()
    return [page for page in range(1, total_pages + 1) if needle in str(page)]


def range_label(state: PaginationState, total_rows: int) -> str:
    first = state.start + 1
    last = min(state.start + state.page_size, total_rows)
    return f"{first}-{last} of {total_rows}"
