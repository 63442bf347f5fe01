from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from hr_datatable.columns import ColumnSet
from hr_datatable.models import SortSpec


def toggle_sorting(sorting: Sequence[SortSpec], column_id: str) -> list[SortSpec]:
    """Single-column toggle with removal disabled: asc, desc, asc, ..."""
    current = sorting[0] if sorting else None
    if current is not None and current.id == column_id:
        return [SortSpec(id=column_id, desc=not current.desc)]
    return [SortSpec(id=column_id, desc=False)]


def sort_key(value: Any) -> tuple[int, Any]:
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, (int, float, Decimal)):
        return (0, value)
    if isinstance(value, datetime):
        return (1, value.isoformat())
    if isinstance(value, date):
        return (1, value.isoformat())
    return (2, str(value).strip().lower())


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _sort_by(rows: list[Any], spec: SortSpec, columns: ColumnSet) -> list[Any]:
    column = columns.get(spec.id)
    if column is None or not column.has_value:
        return rows
    keyed = [(column.value(row), row) for row in rows]
    present = [pair for pair in keyed if not _is_empty(pair[0])]
    empty = [row for value, row in keyed if _is_empty(value)]
    ordered = sorted(present, key=lambda pair: sort_key(pair[0]), reverse=spec.desc)
    # Empty values stay at the bottom in both directions.
    return [row for _, row in ordered] + empty


def sort_rows(rows: Iterable[Any], sorting: Sequence[SortSpec], columns: ColumnSet) -> list[Any]:
    result = list(rows)
    # Lowest precedence first; each pass is stable.
    for spec in reversed(sorting):
        result = _sort_by(result, spec, columns)
    return result
