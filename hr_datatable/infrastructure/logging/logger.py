import json
import logging
from datetime import datetime, timezone
from typing import Any


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def log_action(
    logger: logging.Logger,
    table_id: str | None,
    action: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    payload = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": logging.getLevelName(level),
        "table_id": table_id,
        "action": action,
        "outcome": outcome,
    }
    payload.update(context)
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
