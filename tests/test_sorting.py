from __future__ import annotations

from decimal import Decimal

from procure_datatable import ColumnDescriptor, SortDirection, SortState, next_sort_state, sort_rows
from procure_datatable.sorting import UNSORTED, compare_values


def test_inactive_sort_keeps_input_order(name_columns) -> None:
    rows = [{"id": 3, "name": "c"}, {"id": 1, "name": "a"}]

    assert sort_rows(rows, UNSORTED, name_columns) == rows


def test_ascending_sort_is_stable_on_ties(name_columns) -> None:
    rows = [{"id": 1, "name": "Bravo"}, {"id": 2, "name": "Alpha"}, {"id": 3, "name": "Alpha"}]

    result = sort_rows(rows, SortState("name", SortDirection.ASC), name_columns)

    assert [row["id"] for row in result] == [2, 3, 1]


def test_descending_sort_keeps_tie_order(name_columns) -> None:
    rows = [{"id": 1, "name": "Alpha"}, {"id": 2, "name": "Bravo"}, {"id": 3, "name": "Alpha"}]

    result = sort_rows(rows, SortState("name", SortDirection.DESC), name_columns)

    assert [row["id"] for row in result] == [2, 1, 3]


def test_all_equal_keys_preserve_original_order(name_columns) -> None:
    rows = [{"id": index, "name": "same"} for index in range(10)]

    for direction in SortDirection:
        assert sort_rows(rows, SortState("name", direction), name_columns) == rows


def test_numbers_compare_numerically() -> None:
    columns = [ColumnDescriptor(key="amount", header="Amount")]
    rows = [{"amount": 100}, {"amount": 9}, {"amount": Decimal("20.5")}]

    result = sort_rows(rows, SortState("amount", SortDirection.ASC), columns)

    assert [row["amount"] for row in result] == [9, Decimal("20.5"), 100]


def test_mixed_values_compare_as_strings() -> None:
    assert compare_values("10", 9) < 0
    assert compare_values(None, "a") < 0
    assert compare_values("abc", "ABC") == 0
    assert compare_values(True, 2) > 0


def test_sort_uses_column_accessor() -> None:
    columns = [ColumnDescriptor(key="total", header="Total", accessor=lambda row: row["qty"] * row["price"])]
    rows = [{"qty": 2, "price": 10}, {"qty": 1, "price": 5}]

    result = sort_rows(rows, SortState("total", SortDirection.ASC), columns)

    assert result == [rows[1], rows[0]]


def test_header_click_cycle() -> None:
    state = next_sort_state(UNSORTED, "name")
    assert state == SortState("name", SortDirection.ASC)

    state = next_sort_state(state, "name")
    assert state == SortState("name", SortDirection.DESC)

    state = next_sort_state(state, "name")
    assert state == UNSORTED


def test_clicking_other_column_restarts_at_ascending() -> None:
    state = SortState("name", SortDirection.DESC)

    state = next_sort_state(state, "amount")

    assert state == SortState("amount", SortDirection.ASC)
    assert state.direction_for("name") is None
