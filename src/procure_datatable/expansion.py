from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .columns import RowKey


@dataclass(frozen=True)
class ExpansionState:
    expanded: Mapping[RowKey, bool] = field(default_factory=lambda: MappingProxyType({}))

    def is_expanded(self, key: RowKey) -> bool:
        return self.expanded.get(key, False)

    def expanded_keys(self) -> list[RowKey]:
        return [key for key, is_open in self.expanded.items() if is_open]


def toggle(state: ExpansionState, key: RowKey) -> ExpansionState:
    updated = dict(state.expanded)
    updated[key] = not state.is_expanded(key)
    return ExpansionState(expanded=MappingProxyType(updated))


def retain(state: ExpansionState, present: Iterable[RowKey]) -> ExpansionState:
    keep = set(present)
    return ExpansionState(expanded=MappingProxyType({key: value for key, value in state.expanded.items() if key in keep}))
