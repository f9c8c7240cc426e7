from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel

from .exceptions import DuplicateColumnKeyError

RowKey = Union[str, int]
RowKeyAccessor = Union[str, Callable[[Any], RowKey]]

SELECTION_COLUMN_KEY = "__select__"
EXPANDER_COLUMN_KEY = "__expand__"
SYNTHETIC_COLUMN_KEYS = frozenset({SELECTION_COLUMN_KEY, EXPANDER_COLUMN_KEY})

_ALIGNMENTS = {"left", "center", "right"}


@dataclass(frozen=True)
class ColumnDescriptor:
    """Describes one column of a table over application records.

    ``accessor`` derives the cell value from the row; without it the value is
    read from the row field named ``key``.
    """

    key: str
    header: str
    sortable: bool = True
    filterable: bool = True
    hideable: bool = True
    accessor: Callable[[Any], Any] | None = None
    render: Callable[[Any, Any, int], Any] | None = None
    filter_fn: Callable[[Any, Any], bool] | None = None
    width: str | None = None
    align: str = "left"

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Column key cannot be empty")
        if self.align not in _ALIGNMENTS:
            raise ValueError(f"Unsupported column alignment: {self.align}")

    @property
    def is_synthetic(self) -> bool:
        return self.key in SYNTHETIC_COLUMN_KEYS

    def value_of(self, row: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(row)
        return field_value(row, self.key)


def selection_column() -> ColumnDescriptor:
    return ColumnDescriptor(
        key=SELECTION_COLUMN_KEY,
        header="",
        sortable=False,
        filterable=False,
        hideable=False,
        width="2.5rem",
        align="center",
    )


def expander_column() -> ColumnDescriptor:
    return ColumnDescriptor(
        key=EXPANDER_COLUMN_KEY,
        header="",
        sortable=False,
        filterable=False,
        hideable=False,
        width="3rem",
        align="center",
    )


def field_value(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def field_values(row: Any) -> list[Any]:
    """Every plain field value carried by a row, in declaration order."""
    if isinstance(row, Mapping):
        return list(row.values())
    if isinstance(row, BaseModel):
        return list(row.model_dump().values())
    if dataclasses.is_dataclass(row) and not isinstance(row, type):
        return [getattr(row, item.name) for item in dataclasses.fields(row)]
    if hasattr(row, "__dict__"):
        return list(vars(row).values())
    return [row]


def resolve_row_key(row: Any, accessor: RowKeyAccessor) -> RowKey:
    if callable(accessor):
        return accessor(row)
    return field_value(row, accessor)


def index_columns(columns: Sequence[ColumnDescriptor]) -> dict[str, ColumnDescriptor]:
    indexed: dict[str, ColumnDescriptor] = {}
    duplicated: list[str] = []
    for column in columns:
        if column.key in indexed and column.key not in duplicated:
            duplicated.append(column.key)
        indexed[column.key] = column
    if duplicated:
        raise DuplicateColumnKeyError(duplicated)
    return indexed
