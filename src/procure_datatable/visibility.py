from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from .columns import ColumnDescriptor


@dataclass(frozen=True)
class VisibilityState:
    """Column visibility overrides; a column without an entry is visible."""

    visible: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))

    def is_visible(self, column_key: str) -> bool:
        return self.visible.get(column_key, True)


def set_visible(state: VisibilityState, column_key: str, visible: bool) -> VisibilityState:
    updated = dict(state.visible)
    updated[column_key] = bool(visible)
    return VisibilityState(visible=MappingProxyType(updated))


def visible_columns(state: VisibilityState, columns: Sequence[ColumnDescriptor]) -> list[ColumnDescriptor]:
    return [column for column in columns if state.is_visible(column.key)]


def hideable_columns(columns: Sequence[ColumnDescriptor]) -> list[ColumnDescriptor]:
    return [column for column in columns if column.hideable and not column.is_synthetic]


def hydrate_visibility(payload: Mapping[str, object] | None, columns: Iterable[ColumnDescriptor]) -> VisibilityState:
    allowed = {column.key for column in columns if column.hideable}
    if not isinstance(payload, Mapping):
        return VisibilityState()
    return VisibilityState(
        visible=MappingProxyType({str(key): bool(value) for key, value in payload.items() if key in allowed})
    )
