from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from . import expansion, pagination, selection, visibility
from .columns import (
    ColumnDescriptor,
    RowKey,
    RowKeyAccessor,
    expander_column,
    index_columns,
    resolve_row_key,
    selection_column,
)
from .config import TableConfig
from .exceptions import InvalidPageSizeError
from .filtering import FilterState, filter_rows
from .logging_utils import get_logger, log_table_event
from .options import TableOptions, normalize_options
from .pagination import PageWindow, PaginationState
from .selection import PageSelection, SelectionState
from .sorting import UNSORTED, SortState, next_sort_state, sort_rows

logger = get_logger(__name__)

ViewListener = Callable[["TableView"], None]


@dataclass(frozen=True)
class TableView:
    rows: tuple[Any, ...]
    row_keys: tuple[RowKey, ...]
    total_pages: int
    total_elements: int
    page_index: int
    page_size: int
    start: int
    end: int
    selected_keys: tuple[RowKey, ...]
    page_selection: PageSelection
    expanded_keys: tuple[RowKey, ...]
    columns: tuple[ColumnDescriptor, ...]
    sort: SortState
    filters: FilterState

    @property
    def selected_count(self) -> int:
        return len(self.selected_keys)

    @property
    def can_previous_page(self) -> bool:
        return self.page_index > 0

    @property
    def can_next_page(self) -> bool:
        return self.page_index < self.total_pages - 1

    @property
    def is_empty(self) -> bool:
        return self.total_elements == 0


class TableStateController:
    """Owns filter, sort, page, selection, expansion and visibility state for one table.

    Every mutator applies its delta, re-runs filter -> sort -> paginate and
    hands the resulting :class:`TableView` to subscribed listeners before
    returning it.
    """

    def __init__(
        self,
        rows: Sequence[Any],
        columns: Sequence[ColumnDescriptor],
        *,
        row_key: RowKeyAccessor = "id",
        options: TableOptions | dict[str, Any] | None = None,
        config: TableConfig | None = None,
    ) -> None:
        self.options = normalize_options(options)
        self.config = config or TableConfig()
        self._row_key = row_key
        self._columns = tuple(columns)
        self._column_index = index_columns(self._columns)
        self._listeners: list[ViewListener] = []

        self._filters = FilterState()
        self._sort = self._initial_sort()
        self._pagination = PaginationState(page_index=0, page_size=self.options.resolved_page_size(self.config))
        self._selection = SelectionState()
        self._expansion = expansion.ExpansionState()
        self._visibility = visibility.hydrate_visibility(self.options.column_visibility, self._columns)

        self._load_rows(rows)
        self._recompute()

    @property
    def table_id(self) -> str:
        return self.options.table_id

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        return self._columns

    @property
    def rows(self) -> tuple[Any, ...]:
        return self._rows

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def sort(self) -> SortState:
        return self._sort

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    def get_view(self) -> TableView:
        return self._view

    def row_key_of(self, row: Any) -> RowKey:
        return resolve_row_key(row, self._row_key)

    # queries

    def is_selected(self, key: RowKey) -> bool:
        return self._selection.is_selected(key)

    def selected_count(self) -> int:
        return self._selection.selected_count()

    def is_expanded(self, key: RowKey) -> bool:
        return self._expansion.is_expanded(key)

    def is_column_visible(self, column_key: str) -> bool:
        return self._visibility.is_visible(column_key)

    def visible_columns(self) -> list[ColumnDescriptor]:
        return visibility.visible_columns(self._visibility, self._columns)

    def hideable_columns(self) -> list[ColumnDescriptor]:
        return visibility.hideable_columns(self._columns)

    def render_columns(self) -> list[ColumnDescriptor]:
        rendered = self.visible_columns()
        if self.options.selectable:
            rendered.insert(0, selection_column())
        if self.options.expandable:
            rendered.append(expander_column())
        return rendered

    def col_span(self) -> int:
        return len(self.render_columns())

    def selected_rows(self, *, filtered_only: bool = True) -> list[Any]:
        pool = self._filtered if filtered_only else self._rows
        return [row for row in pool if self._selection.is_selected(self.row_key_of(row))]

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # filter / sort

    def set_global_filter(self, text: str) -> TableView:
        updated = self._filters.with_global_text(text)
        return self._commit_filters("set_global_filter", updated)

    def set_column_filter(self, column_key: str, value: Any) -> TableView:
        column = self._column_index.get(column_key)
        if column is None:
            return self._ignore("set_column_filter", "unknown_column", column_key=column_key)
        if not column.filterable:
            return self._ignore("set_column_filter", "not_filterable", column_key=column_key)
        return self._commit_filters("set_column_filter", self._filters.with_column(column_key, value))

    def toggle_sort(self, column_key: str) -> TableView:
        column = self._column_index.get(column_key)
        if column is None:
            return self._ignore("toggle_sort", "unknown_column", column_key=column_key)
        if not column.sortable:
            return self._ignore("toggle_sort", "not_sortable", column_key=column_key)
        self._sort = next_sort_state(self._sort, column_key)
        self._pagination = pagination.first_page(self._pagination)
        return self._commit(
            "toggle_sort",
            column_key=column_key,
            direction=self._sort.direction.value if self._sort.direction else None,
        )

    # pages

    def go_to_page(self, page_index: int) -> TableView:
        self._pagination = pagination.goto_page(self._pagination, page_index, self._view.total_pages)
        return self._commit("go_to_page", requested=page_index)

    def first_page(self) -> TableView:
        self._pagination = pagination.first_page(self._pagination)
        return self._commit("first_page")

    def previous_page(self) -> TableView:
        self._pagination = pagination.previous_page(self._pagination, self._view.total_pages)
        return self._commit("previous_page")

    def next_page(self) -> TableView:
        self._pagination = pagination.next_page(self._pagination, self._view.total_pages)
        return self._commit("next_page")

    def last_page(self) -> TableView:
        self._pagination = pagination.last_page(self._pagination, self._view.total_pages)
        return self._commit("last_page")

    def set_page_size(self, page_size: int) -> TableView:
        if page_size < 1 or page_size > self.config.max_page_size:
            raise InvalidPageSizeError(page_size, self.config.max_page_size)
        self._pagination = pagination.resize_page(self._pagination, page_size, self._view.total_elements)
        return self._commit("set_page_size", page_size=page_size)

    # selection / expansion

    def toggle_row_selection(self, key: RowKey) -> TableView:
        if key not in self._key_set:
            return self._ignore("toggle_row_selection", "unknown_row", row_key=key)
        self._selection = selection.toggle(self._selection, key)
        return self._commit("toggle_row_selection", row_key=key)

    def toggle_all_on_page(self) -> TableView:
        self._selection = selection.toggle_all(self._selection, self._view.row_keys)
        return self._commit("toggle_all_on_page", page_rows=len(self._view.row_keys))

    def toggle_all_filtered(self) -> TableView:
        keys = [self.row_key_of(row) for row in self._filtered]
        self._selection = selection.toggle_all(self._selection, keys)
        return self._commit("toggle_all_filtered", filtered_rows=len(keys))

    def clear_selection(self) -> TableView:
        self._selection = selection.clear(self._selection)
        return self._commit("clear_selection")

    def toggle_row_expansion(self, key: RowKey) -> TableView:
        if key not in self._key_set:
            return self._ignore("toggle_row_expansion", "unknown_row", row_key=key)
        self._expansion = expansion.toggle(self._expansion, key)
        return self._commit("toggle_row_expansion", row_key=key)

    # columns / rows

    def set_column_visible(self, column_key: str, visible: bool) -> TableView:
        column = self._column_index.get(column_key)
        if column is None:
            return self._ignore("set_column_visible", "unknown_column", column_key=column_key)
        if not column.hideable:
            return self._ignore("set_column_visible", "not_hideable", column_key=column_key)
        self._visibility = visibility.set_visible(self._visibility, column_key, visible)
        return self._commit("set_column_visible", column_key=column_key, visible=bool(visible))

    def set_rows(self, rows: Sequence[Any]) -> TableView:
        self._load_rows(rows)
        self._selection = selection.retain(self._selection, self._key_set)
        self._expansion = expansion.retain(self._expansion, self._key_set)
        return self._commit("set_rows", row_count=len(self._rows))

    # internals

    def _initial_sort(self) -> SortState:
        spec = self.options.initial_sort
        if spec is None:
            return UNSORTED
        column = self._column_index.get(spec.column_key)
        if column is None or not column.sortable:
            log_table_event(
                logger, self.table_id, "initial_sort", "ignored", reason="unsortable_column", column_key=spec.column_key
            )
            return UNSORTED
        return spec.to_state()

    def _load_rows(self, rows: Iterable[Any]) -> None:
        self._rows = tuple(rows)
        self._keys = tuple(self.row_key_of(row) for row in self._rows)
        self._key_set = frozenset(self._keys)

    def _commit_filters(self, action: str, updated: FilterState) -> TableView:
        if updated != self._filters:
            self._filters = updated
            self._pagination = pagination.first_page(self._pagination)
        return self._commit(action, filters=len(updated.per_column), has_global=bool(updated.global_text))

    def _commit(self, action: str, **context: Any) -> TableView:
        self._recompute()
        log_table_event(
            logger,
            self.table_id,
            action,
            "applied",
            page_index=self._view.page_index,
            total_elements=self._view.total_elements,
            selected_count=self._view.selected_count,
            **context,
        )
        self._notify()
        return self._view

    def _ignore(self, action: str, reason: str, **context: Any) -> TableView:
        log_table_event(logger, self.table_id, action, "ignored", reason=reason, **context)
        self._notify()
        return self._view

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._view)

    def _recompute(self) -> None:
        filtered = filter_rows(self._rows, self._filters, self._columns)
        ordered = sort_rows(filtered, self._sort, self._columns)
        self._filtered = ordered
        if self.options.paginate:
            pages = pagination.total_pages(len(ordered), self._pagination.page_size)
            self._pagination = pagination.goto_page(self._pagination, self._pagination.page_index, pages)
            window = pagination.paginate(ordered, self._pagination)
        else:
            self._pagination = pagination.first_page(self._pagination)
            window = PageWindow(page=tuple(ordered), total_pages=1, start=0, end=len(ordered))

        page_keys = tuple(self.row_key_of(row) for row in window.page)
        self._view = TableView(
            rows=window.page,
            row_keys=page_keys,
            total_pages=window.total_pages,
            total_elements=len(ordered),
            page_index=self._pagination.page_index,
            page_size=self._pagination.page_size,
            start=window.start,
            end=window.end,
            selected_keys=tuple(dict.fromkeys(key for key in self._keys if self._selection.is_selected(key))),
            page_selection=selection.page_selection(self._selection, page_keys),
            expanded_keys=tuple(key for key in page_keys if self._expansion.is_expanded(key)),
            columns=tuple(self.render_columns()),
            sort=self._sort,
            filters=self._filters,
        )


def create_table(
    rows: Sequence[Any],
    columns: Sequence[ColumnDescriptor],
    options: TableOptions | dict[str, Any] | None = None,
    *,
    row_key: RowKeyAccessor = "id",
    config: TableConfig | None = None,
) -> TableStateController:
    return TableStateController(rows, columns, row_key=row_key, options=options, config=config)
