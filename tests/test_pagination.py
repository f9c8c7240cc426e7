from __future__ import annotations

import math

import pytest

from procure_datatable import PaginationState, paginate
from procure_datatable.pagination import (
    first_page,
    goto_page,
    last_page,
    next_page,
    previous_page,
    resize_page,
    total_pages,
)


@pytest.mark.parametrize("page_size", [1, 2, 3, 7, 10, 25])
@pytest.mark.parametrize("row_count", [0, 1, 9, 10, 11, 23, 100])
def test_total_pages_formula(row_count: int, page_size: int) -> None:
    assert total_pages(row_count, page_size) == max(1, math.ceil(row_count / page_size))


def test_page_window_slices_rows() -> None:
    rows = list(range(23))

    window = paginate(rows, PaginationState(page_index=2, page_size=10))

    assert window.page == (20, 21, 22)
    assert window.total_pages == 3
    assert (window.start, window.end) == (20, 23)


def test_empty_rows_have_one_page() -> None:
    window = paginate([], PaginationState(page_index=0, page_size=10))

    assert window.page == ()
    assert window.total_pages == 1


def test_navigation_clamps_to_range() -> None:
    state = PaginationState(page_index=0, page_size=10)

    assert previous_page(state, 3).page_index == 0
    assert next_page(state, 3).page_index == 1
    assert next_page(PaginationState(2, 10), 3).page_index == 2
    assert last_page(state, 3).page_index == 2
    assert first_page(PaginationState(2, 10)).page_index == 0
    assert goto_page(state, 5, 3).page_index == 2
    assert goto_page(state, -4, 3).page_index == 0


def test_resize_keeps_first_visible_row() -> None:
    state = PaginationState(page_index=3, page_size=5)

    resized = resize_page(state, 10, row_count=40)

    assert resized == PaginationState(page_index=1, page_size=10)
    assert resize_page(PaginationState(4, 5), 50, row_count=23).page_index == 0
