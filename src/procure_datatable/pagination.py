from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class PaginationState:
    page_index: int = 0
    page_size: int = 10


@dataclass(frozen=True)
class PageWindow:
    page: tuple[Any, ...]
    total_pages: int
    start: int
    end: int


def total_pages(row_count: int, page_size: int) -> int:
    return max(1, math.ceil(row_count / page_size))


def clamp_page_index(page_index: int, pages: int) -> int:
    return min(max(0, page_index), pages - 1)


def paginate(rows: Sequence[Any], state: PaginationState) -> PageWindow:
    pages = total_pages(len(rows), state.page_size)
    start = state.page_index * state.page_size
    end = min(start + state.page_size, len(rows))
    return PageWindow(page=tuple(rows[start:end]), total_pages=pages, start=start, end=max(start, end))


def first_page(state: PaginationState) -> PaginationState:
    return replace(state, page_index=0)


def previous_page(state: PaginationState, pages: int) -> PaginationState:
    return goto_page(state, state.page_index - 1, pages)


def next_page(state: PaginationState, pages: int) -> PaginationState:
    return goto_page(state, state.page_index + 1, pages)


def last_page(state: PaginationState, pages: int) -> PaginationState:
    return replace(state, page_index=pages - 1)


def goto_page(state: PaginationState, page_index: int, pages: int) -> PaginationState:
    return replace(state, page_index=clamp_page_index(page_index, pages))


def resize_page(state: PaginationState, page_size: int, row_count: int) -> PaginationState:
    """Change the page size while keeping the current first row on screen."""
    top_row = state.page_index * state.page_size
    page_index = clamp_page_index(top_row // page_size, total_pages(row_count, page_size))
    return PaginationState(page_index=page_index, page_size=page_size)
