from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable

from hr_datatable.accessors import Accessor, get_field, resolve
from hr_datatable.exceptions import UnknownColumnError
from hr_datatable.ui.listing_view import normalize_value

CellRenderer = Callable[[Any, Any], str]


@dataclass(frozen=True)
class ColumnDef:
    """One displayed field or computed cell of a row type.

    ``accessor`` is a dotted path or a callable; when omitted the column is a
    display column (checkbox, actions) without a value of its own.
    """

    id: str
    accessor: Accessor | None = None
    header: str | Callable[["ColumnDef"], str] | None = None
    cell: CellRenderer | None = None
    size: int | None = None
    enable_sorting: bool = True
    enable_hiding: bool = True

    @property
    def has_value(self) -> bool:
        return self.accessor is not None

    @property
    def can_sort(self) -> bool:
        return self.enable_sorting and self.has_value

    def header_text(self) -> str:
        if callable(self.header):
            return str(self.header(self))
        if self.header is not None:
            return self.header
        return self.id.replace("_", " ").title()

    def value(self, row: Any) -> Any:
        return resolve(row, self.accessor)

    def render_cell(self, row: Any) -> str:
        value = self.value(row)
        if self.cell is not None:
            return str(self.cell(row, value))
        return normalize_value(value)


def accessor_column(key: str, header: str | None = None, **options: Any) -> ColumnDef:
    return ColumnDef(id=key, accessor=key, header=header, **options)


class ColumnSet:
    """Ordered, immutable lookup over a table's column definitions."""

    def __init__(self, columns: Iterable[ColumnDef]) -> None:
        self._columns = tuple(columns)
        self._by_id = {column.id: column for column in self._columns}
        if len(self._by_id) != len(self._columns):
            raise ValueError("column ids must be unique")

    def __iter__(self):
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, column_id: object) -> bool:
        return column_id in self._by_id

    def get(self, column_id: str) -> ColumnDef | None:
        return self._by_id.get(column_id)

    def require(self, column_id: str) -> ColumnDef:
        column = self._by_id.get(column_id)
        if column is None:
            raise UnknownColumnError(
                code="UNKNOWN_COLUMN",
                message=f"Unknown column: {column_id}",
                details={"column_id": column_id, "known": list(self._by_id)},
            )
        return column

    @property
    def ids(self) -> list[str]:
        return [column.id for column in self._columns]

    def lookup(self, row: Any, key: str) -> Any:
        """Column accessor first, direct field lookup when that yields nothing."""
        column = self._by_id.get(key)
        value = column.value(row) if column is not None and column.has_value else None
        if value is None:
            value = get_field(row, key)
        return value
