from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .exceptions import ConfigError

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class TableConfig:
    default_page_size: int = 10
    max_page_size: int = 500
    search_debounce_ms: int = 350
    log_level: str = "WARNING"


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> TableConfig:
    """Load table defaults from environment with optional .env override."""
    load_dotenv(env_file)

    max_page_size = _read_int("PROCURE_TABLE_MAX_PAGE_SIZE", "500")
    _validate(max_page_size >= 1, f"Invalid PROCURE_TABLE_MAX_PAGE_SIZE: expected >= 1, got {max_page_size}")

    default_page_size = _read_int("PROCURE_TABLE_DEFAULT_PAGE_SIZE", "10")
    _validate(
        1 <= default_page_size <= max_page_size,
        (
            "Invalid PROCURE_TABLE_DEFAULT_PAGE_SIZE: "
            f"expected 1..{max_page_size}, got {default_page_size}"
        ),
    )

    search_debounce_ms = _read_int("PROCURE_TABLE_SEARCH_DEBOUNCE_MS", "350")
    _validate(
        search_debounce_ms >= 0,
        f"Invalid PROCURE_TABLE_SEARCH_DEBOUNCE_MS: expected >= 0, got {search_debounce_ms}",
    )

    log_level = (os.getenv("PROCURE_TABLE_LOG_LEVEL") or "WARNING").strip().upper()
    _validate(log_level in _LOG_LEVELS, f"Invalid PROCURE_TABLE_LOG_LEVEL: got {log_level!r}")

    return TableConfig(
        default_page_size=default_page_size,
        max_page_size=max_page_size,
        search_debounce_ms=search_debounce_ms,
        log_level=log_level,
    )
