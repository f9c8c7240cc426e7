from __future__ import annotations


class TableError(Exception):
    """Base class for errors raised by the table engine."""


class ConfigError(TableError, ValueError):
    pass


class InvalidTableOptionsError(TableError, ValueError):
    pass


class DuplicateColumnKeyError(TableError, ValueError):
    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        super().__init__(f"Column keys must be unique, duplicated: {', '.join(keys)}")


class InvalidPageSizeError(TableError, ValueError):
    def __init__(self, page_size: int, max_page_size: int) -> None:
        self.page_size = page_size
        self.max_page_size = max_page_size
        super().__init__(f"Invalid page size {page_size}: expected 1..{max_page_size}")
