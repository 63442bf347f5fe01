from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DataTableError(Exception):
    code: str
    message: str
    details: object | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class UnknownColumnError(DataTableError):
    """A column id that is not part of the table's column set."""


class InvalidPageSizeError(DataTableError):
    """Page size outside the configured allow-list."""


class PreferenceStoreError(DataTableError):
    """Preference read or write failed in the backing store."""


class BulkActionError(DataTableError):
    """Host callback for a bulk action failed."""
