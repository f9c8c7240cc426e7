from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from .columns import EXPANDER_COLUMN_KEY, SELECTION_COLUMN_KEY, ColumnDescriptor, RowKey

if TYPE_CHECKING:
    from .controller import TableStateController, TableView

EMPTY_VALUE = "—"
NO_RESULTS_MESSAGE = "No results match your search criteria."
NO_DATA_MESSAGE = "No data available to display."


@dataclass(frozen=True)
class RenderedRow:
    key: RowKey
    index: int
    cells: tuple[Any, ...]
    selected: bool
    expanded: bool


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, str):
        clean = value.strip()
        return clean or EMPTY_VALUE
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return f"{value:,.2f}"
    return str(value)


def render_cell(column: ColumnDescriptor, row: Any, index: int) -> Any:
    value = column.value_of(row)
    if column.render is not None:
        return column.render(value, row, index)
    return normalize_value(value)


def render_page(controller: TableStateController) -> list[RenderedRow]:
    """Cells for the current page, one per rendered data column.

    Synthetic selection/expander columns carry the row's checked/expanded flag.
    """
    view = controller.get_view()
    rendered: list[RenderedRow] = []
    for offset, (row, key) in enumerate(zip(view.rows, view.row_keys)):
        index = view.start + offset
        selected = controller.is_selected(key)
        expanded = controller.is_expanded(key)
        cells: list[Any] = []
        for column in view.columns:
            if column.key == SELECTION_COLUMN_KEY:
                cells.append(selected)
            elif column.key == EXPANDER_COLUMN_KEY:
                cells.append(expanded)
            else:
                cells.append(render_cell(column, row, index))
        rendered.append(RenderedRow(key=key, index=index, cells=tuple(cells), selected=selected, expanded=expanded))
    return rendered


def page_summary(view: TableView) -> str:
    if view.total_elements == 0:
        return "Showing 0 to 0 of 0 entries"
    return f"Showing {view.start + 1} to {view.end} of {view.total_elements} entries"


def empty_state_message(view: TableView) -> str | None:
    if not view.is_empty:
        return None
    return NO_RESULTS_MESSAGE if view.filters.is_active else NO_DATA_MESSAGE
