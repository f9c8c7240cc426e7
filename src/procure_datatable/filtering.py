from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from .columns import ColumnDescriptor, field_values


@dataclass(frozen=True)
class FilterState:
    global_text: str = ""
    per_column: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_active(self) -> bool:
        return bool(self.global_text) or bool(self.per_column)

    def with_global_text(self, text: str) -> FilterState:
        return replace(self, global_text=text or "")

    def with_column(self, column_key: str, value: Any) -> FilterState:
        updated = dict(self.per_column)
        updated[column_key] = value
        return replace(self, per_column=MappingProxyType(clean_filters(updated)))


def clean_filters(filters: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in filters.items() if value not in (None, "")}


def _haystack(row: Any, columns: Sequence[ColumnDescriptor]) -> list[str]:
    values = field_values(row)
    values.extend(column.value_of(row) for column in columns if column.accessor is not None)
    return [str(value).lower() for value in values if value is not None]


def matches_global(row: Any, text: str, columns: Sequence[ColumnDescriptor]) -> bool:
    if not text:
        return True
    probe = text.lower()
    return any(probe in item for item in _haystack(row, columns))


def matches_column(row: Any, column: ColumnDescriptor, filter_value: Any) -> bool:
    value = column.value_of(row)
    if column.filter_fn is not None:
        return bool(column.filter_fn(value, filter_value))
    if callable(filter_value):
        return bool(filter_value(value))
    if value is None:
        return False
    return str(filter_value).lower() in str(value).lower()


def filter_rows(rows: Sequence[Any], state: FilterState, columns: Sequence[ColumnDescriptor]) -> list[Any]:
    by_key = {column.key: column for column in columns}
    active = [(by_key[key], value) for key, value in state.per_column.items() if key in by_key]
    return [
        row
        for row in rows
        if matches_global(row, state.global_text, columns)
        and all(matches_column(row, column, value) for column, value in active)
    ]
