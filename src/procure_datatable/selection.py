from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .columns import RowKey


class PageSelection(str, Enum):
    NONE = "none"
    SOME = "some"
    ALL = "all"


@dataclass(frozen=True)
class SelectionState:
    keys: frozenset[RowKey] = frozenset()

    def is_selected(self, key: RowKey) -> bool:
        return key in self.keys

    def selected_count(self) -> int:
        return len(self.keys)


def toggle(state: SelectionState, key: RowKey) -> SelectionState:
    if key in state.keys:
        return SelectionState(keys=state.keys - {key})
    return SelectionState(keys=state.keys | {key})


def toggle_all(state: SelectionState, keys: Iterable[RowKey]) -> SelectionState:
    """Select every key in ``keys`` unless all of them already are, then deselect exactly those.

    Keys outside ``keys`` keep their current membership.
    """
    scope = frozenset(keys)
    if not scope:
        return state
    if scope <= state.keys:
        return SelectionState(keys=state.keys - scope)
    return SelectionState(keys=state.keys | scope)


def clear(state: SelectionState) -> SelectionState:
    return SelectionState() if state.keys else state


def retain(state: SelectionState, present: Iterable[RowKey]) -> SelectionState:
    return SelectionState(keys=state.keys & frozenset(present))


def page_selection(state: SelectionState, page_keys: Iterable[RowKey]) -> PageSelection:
    keys = list(page_keys)
    hits = sum(1 for key in keys if key in state.keys)
    if not keys or hits == 0:
        return PageSelection.NONE
    if hits == len(keys):
        return PageSelection.ALL
    return PageSelection.SOME
