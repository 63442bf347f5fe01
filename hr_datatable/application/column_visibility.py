from __future__ import annotations

import logging
from typing import Any

from hr_datatable.columns import ColumnDef, ColumnSet
from hr_datatable.infrastructure.logging.logger import get_logger, log_action
from hr_datatable.infrastructure.preferences.store import PreferenceStore, column_visibility_key


def hydrate_visibility(payload: Any, columns: ColumnSet) -> dict[str, bool]:
    if not isinstance(payload, dict):
        return {}
    return {str(key): bool(value) for key, value in payload.items() if key in columns and isinstance(value, bool)}


class ColumnVisibility:
    """Per-column show/hide state, persisted per table identity.

    Without a ``table_id`` (or a store) the state is session-only. Reading the
    stored layout never writes it back; only explicit toggles save.
    """

    def __init__(
        self,
        columns: ColumnSet,
        *,
        table_id: str | None = None,
        store: PreferenceStore | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.columns = columns
        self.table_id = table_id
        self.store = store
        self.logger = logger or get_logger(__name__)
        self.storage_key = column_visibility_key(table_id) if table_id and store is not None else None
        self._closed = False
        self._visibility: dict[str, bool] = self._load()

    def _load(self) -> dict[str, bool]:
        if self.storage_key is None:
            return {}
        try:
            payload = self.store.get(self.storage_key)
        except Exception as exc:  # all columns visible
            log_action(
                self.logger,
                self.table_id,
                "column_visibility.load",
                "failed",
                level=logging.WARNING,
                error=str(exc),
            )
            return {}
        return hydrate_visibility(payload, self.columns)

    def _save(self) -> None:
        if self.storage_key is None or self._closed:
            return
        try:
            self.store.set(self.storage_key, dict(self._visibility))
        except Exception as exc:  # persisted copy goes stale
            log_action(
                self.logger,
                self.table_id,
                "column_visibility.save",
                "failed",
                level=logging.WARNING,
                error=str(exc),
            )

    @property
    def state(self) -> dict[str, bool]:
        return dict(self._visibility)

    def is_visible(self, column_id: str) -> bool:
        return self._visibility.get(column_id, True)

    def toggle(self, column_id: str, visible: bool) -> bool:
        column = self.columns.require(column_id)
        if not column.enable_hiding:
            return False
        if self._visibility.get(column_id, True) == visible and column_id in self._visibility:
            return False
        self._visibility = {**self._visibility, column_id: bool(visible)}
        self._save()
        return True

    def visible_columns(self) -> list[ColumnDef]:
        return [column for column in self.columns if self.is_visible(column.id)]

    def hideable_columns(self) -> list[ColumnDef]:
        return [column for column in self.columns if column.enable_hiding]

    def close(self) -> None:
        self._closed = True
