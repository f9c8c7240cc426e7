from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from functools import cmp_to_key
from typing import Any

from .columns import ColumnDescriptor


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    column_key: str | None = None
    direction: SortDirection | None = None

    @property
    def is_active(self) -> bool:
        return self.column_key is not None and self.direction is not None

    def direction_for(self, column_key: str) -> SortDirection | None:
        if self.column_key == column_key:
            return self.direction
        return None


UNSORTED = SortState()


def next_sort_state(state: SortState, column_key: str) -> SortState:
    """Header click cycle: none -> asc -> desc -> none, one active column at a time."""
    if state.column_key != column_key or state.direction is None:
        return SortState(column_key=column_key, direction=SortDirection.ASC)
    if state.direction is SortDirection.ASC:
        return SortState(column_key=column_key, direction=SortDirection.DESC)
    return UNSORTED


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal, Fraction)) and not isinstance(value, bool)


def compare_values(left: Any, right: Any) -> int:
    if _is_number(left) and _is_number(right):
        return (left > right) - (left < right)
    left_text = "" if left is None else str(left).lower()
    right_text = "" if right is None else str(right).lower()
    return (left_text > right_text) - (left_text < right_text)


def sort_rows(rows: Sequence[Any], state: SortState, columns: Sequence[ColumnDescriptor]) -> list[Any]:
    column = next((item for item in columns if item.key == state.column_key), None)
    if not state.is_active or column is None:
        return list(rows)
    # sorted() is stable and keeps tie order under reverse=True as well
    return sorted(
        rows,
        key=cmp_to_key(lambda a, b: compare_values(column.value_of(a), column.value_of(b))),
        reverse=state.direction is SortDirection.DESC,
    )
