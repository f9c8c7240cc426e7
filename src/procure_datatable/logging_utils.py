from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .config import TableConfig

LOGGER_NAMESPACE = "procure_datatable"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    root = logging.getLogger(LOGGER_NAMESPACE)
    if root.handlers:
        return logger
    root.setLevel(logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    return logger


def configure_logging(config: TableConfig) -> None:
    logging.getLogger(LOGGER_NAMESPACE).setLevel(config.log_level)


def log_table_event(
    logger: logging.Logger,
    table_id: str,
    action: str,
    outcome: str,
    **context: Any,
) -> None:
    # runs on every mutation; skip serialization unless debug output is enabled
    if not logger.isEnabledFor(logging.DEBUG):
        return
    payload = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "table_id": table_id,
        "action": action,
        "outcome": outcome,
    }
    payload.update(context)
    logger.debug(json.dumps(payload, default=str))
