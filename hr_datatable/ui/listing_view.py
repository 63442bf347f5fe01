from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

EMPTY_VALUE = "—"
STATUS_WORDS = {"active", "inactive", "pending", "approved", "rejected", "suspended"}


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        clean = value.strip()
        if not clean:
            return EMPTY_VALUE
        if clean.lower() in STATUS_WORDS:
            return clean.upper()
        return clean
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return f"{value:,.2f}"
    if isinstance(value, float):
        return f"{value:,.2f}"
    if isinstance(value, (list, tuple, set)):
        parts = [normalize_value(item) for item in value]
        return ", ".join(part for part in parts if part != EMPTY_VALUE) or EMPTY_VALUE
    return str(value)
