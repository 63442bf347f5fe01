"""Total lookups of values on arbitrary row shapes.

Rows may be mappings, dataclasses, pydantic models or plain objects. Every
function here returns ``None`` for anything it cannot resolve instead of
raising, so search and filter code can treat missing values as non-matching.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable

Accessor = str | Callable[[Any], Any]


def get_field(row: Any, key: str) -> Any:
    """Direct one-level lookup: mapping key first, then attribute."""
    if row is None:
        return None
    if isinstance(row, Mapping):
        return row.get(key)
    try:
        return getattr(row, key, None)
    except Exception:
        return None


def get_path(row: Any, path: str) -> Any:
    """Follow a dotted path such as ``department.name`` or ``phones.0``."""
    if not path:
        return None
    current = row
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, Sequence) and not isinstance(current, (str, bytes)) and part.isdigit():
            index = int(part)
            current = current[index] if index < len(current) else None
            continue
        current = get_field(current, part)
    return current


def resolve(row: Any, accessor: Accessor | None) -> Any:
    if accessor is None:
        return None
    if callable(accessor):
        try:
            return accessor(row)
        except Exception:
            return None
    return get_path(row, accessor)


def row_id(row: Any) -> Any:
    return get_field(row, "id")


def as_text(value: Any) -> str:
    return "" if value is None else str(value)
