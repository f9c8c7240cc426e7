from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from procure_datatable import ColumnDescriptor, create_table, empty_state_message, page_summary, render_page
from procure_datatable.rendering import EMPTY_VALUE, NO_DATA_MESSAGE, NO_RESULTS_MESSAGE, normalize_value


def test_normalize_value() -> None:
    assert normalize_value(None) == EMPTY_VALUE
    assert normalize_value("   ") == EMPTY_VALUE
    assert normalize_value(" PO-1 ") == "PO-1"
    assert normalize_value(True) == "Yes"
    assert normalize_value(Decimal("1234.5")) == "1,234.50"
    assert normalize_value(date(2024, 3, 1)) == "2024-03-01"
    assert normalize_value(datetime(2024, 3, 1, 9, 30)) == "2024-03-01 09:30"
    assert normalize_value(42) == "42"


def test_render_page_uses_column_render_and_synthetic_cells(po_rows) -> None:
    columns = [
        ColumnDescriptor(key="po_number", header="PO #"),
        ColumnDescriptor(key="amount", header="Amount", render=lambda value, row, index: f"{index}:{value:.0f}"),
    ]
    table = create_table(po_rows, columns, {"page_size": 3, "selectable": True, "expandable": True})
    table.next_page()
    table.toggle_row_selection(4)
    table.toggle_row_expansion(5)

    rendered = render_page(table)

    assert [row.key for row in rendered] == [4, 5, 6]
    first = rendered[0]
    assert first.index == 3
    assert first.cells == (True, "PO-0004", f"3:{po_rows[3]['amount']:.0f}", False)
    assert rendered[1].expanded is True
    assert rendered[1].cells[-1] is True


def test_page_summary(po_rows, po_columns) -> None:
    table = create_table(po_rows, po_columns, {"page_size": 10})

    assert page_summary(table.get_view()) == "Showing 1 to 10 of 23 entries"
    assert page_summary(table.last_page()) == "Showing 21 to 23 of 23 entries"
    assert page_summary(table.set_global_filter("zzz")) == "Showing 0 to 0 of 0 entries"


def test_empty_state_message(po_rows, po_columns) -> None:
    table = create_table(po_rows, po_columns)
    assert empty_state_message(table.get_view()) is None

    assert empty_state_message(table.set_global_filter("zzz")) == NO_RESULTS_MESSAGE

    empty = create_table([], po_columns)
    assert empty_state_message(empty.get_view()) == NO_DATA_MESSAGE
