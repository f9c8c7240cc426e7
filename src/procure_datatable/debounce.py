from __future__ import annotations

import time
from collections.abc import Callable

from .config import TableConfig


class SearchDebouncer:
    """Holds search keystrokes until the input has been quiet for ``wait_ms``."""

    def __init__(self, wait_ms: int = 350, clock: Callable[[], float] | None = None) -> None:
        self.wait_ms = max(0, wait_ms)
        self._clock = clock or time.monotonic
        self._pending: str | None = None
        self._last_push = 0.0

    @classmethod
    def from_config(cls, config: TableConfig, clock: Callable[[], float] | None = None) -> SearchDebouncer:
        return cls(wait_ms=config.search_debounce_ms, clock=clock)

    @property
    def pending(self) -> str | None:
        return self._pending

    def push(self, text: str) -> None:
        self._pending = text
        self._last_push = self._clock()

    def poll(self) -> str | None:
        if self._pending is None:
            return None
        if (self._clock() - self._last_push) * 1000 < self.wait_ms:
            return None
        settled, self._pending = self._pending, None
        return settled

    def flush(self) -> str | None:
        settled, self._pending = self._pending, None
        return settled
