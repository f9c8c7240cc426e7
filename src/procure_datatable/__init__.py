from .columns import (
    EXPANDER_COLUMN_KEY,
    SELECTION_COLUMN_KEY,
    ColumnDescriptor,
    RowKey,
    expander_column,
    selection_column,
)
from .config import TableConfig, load_config
from .controller import TableStateController, TableView, create_table
from .debounce import SearchDebouncer
from .exceptions import (
    ConfigError,
    DuplicateColumnKeyError,
    InvalidPageSizeError,
    InvalidTableOptionsError,
    TableError,
)
from .filtering import FilterState, filter_rows
from .logging_utils import configure_logging
from .options import SortSpec, TableOptions
from .pagination import PageWindow, PaginationState, paginate
from .rendering import RenderedRow, empty_state_message, page_summary, render_page
from .selection import PageSelection, SelectionState
from .sorting import SortDirection, SortState, next_sort_state, sort_rows

__all__ = [
    "ColumnDescriptor",
    "ConfigError",
    "DuplicateColumnKeyError",
    "EXPANDER_COLUMN_KEY",
    "FilterState",
    "InvalidPageSizeError",
    "InvalidTableOptionsError",
    "PageSelection",
    "PageWindow",
    "PaginationState",
    "RenderedRow",
    "RowKey",
    "SELECTION_COLUMN_KEY",
    "SearchDebouncer",
    "SelectionState",
    "SortDirection",
    "SortSpec",
    "SortState",
    "TableConfig",
    "TableError",
    "TableOptions",
    "TableStateController",
    "TableView",
    "configure_logging",
    "create_table",
    "empty_state_message",
    "expander_column",
    "filter_rows",
    "load_config",
    "next_sort_state",
    "page_summary",
    "paginate",
    "render_page",
    "selection_column",
    "sort_rows",
]

__version__ = "0.1.0"
