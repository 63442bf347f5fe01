from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any

from hr_datatable.accessors import row_id
from hr_datatable.exceptions import BulkActionError
from hr_datatable.infrastructure.errors.error_mapper import ErrorMapper
from hr_datatable.infrastructure.logging.logger import get_logger, log_action
from hr_datatable.models import DeleteMode

DeleteCallback = Callable[[list[Any]], Any]
EditCallback = Callable[[list[Any]], Any]


class RowSelection:
    """Selected row ids in selection order, independent of paging and filters."""

    def __init__(self) -> None:
        self._ids: dict[Any, None] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._ids

    @property
    def ids(self) -> list[Any]:
        return list(self._ids)

    def select(self, row_id: Any) -> None:
        self._ids = {**self._ids, row_id: None}

    def select_many(self, row_ids: Iterable[Any]) -> None:
        self._ids = {**self._ids, **{row_id: None for row_id in row_ids}}

    def deselect(self, row_id: Any) -> None:
        self._ids = {key: None for key in self._ids if key != row_id}

    def toggle(self, row_id: Any) -> bool:
        if row_id in self._ids:
            self.deselect(row_id)
            return False
        self.select(row_id)
        return True

    def clear(self) -> None:
        self._ids = {}


class RowCollection:
    """Full in-memory row set plus ids parked for pending removal.

    A ``Future`` returned by the delete callback may settle on a worker
    thread, so every read and write holds the lock.
    """

    def __init__(self, rows: Iterable[Any] = ()) -> None:
        self._rows: list[Any] = list(rows)
        self._pending: set[Any] = set()
        self._lock = threading.Lock()

    def replace(self, rows: Iterable[Any]) -> None:
        fresh = list(rows)
        with self._lock:
            self._rows = fresh

    @property
    def all(self) -> list[Any]:
        with self._lock:
            if not self._pending:
                return list(self._rows)
            return [row for row in self._rows if row_id(row) not in self._pending]

    @property
    def pending_ids(self) -> set[Any]:
        with self._lock:
            return set(self._pending)

    def find(self, row_ids: Iterable[Any]) -> list[Any]:
        wanted = set(row_ids)
        return [row for row in self.all if row_id(row) in wanted]

    def park(self, row_ids: Iterable[Any]) -> None:
        parked = set(row_ids)
        with self._lock:
            self._pending = self._pending | parked

    def restore(self, row_ids: Iterable[Any]) -> None:
        restored = set(row_ids)
        with self._lock:
            self._pending = self._pending - restored

    def remove(self, row_ids: Iterable[Any]) -> None:
        doomed = set(row_ids)
        with self._lock:
            self._rows = [row for row in self._rows if row_id(row) not in doomed]
            self._pending = self._pending - doomed


@dataclass(frozen=True)
class BulkDeleteResult:
    ids: list[Any] = field(default_factory=list)
    status: str = "nothing_selected"
    error: str | None = None


def summarize_bulk_results(results: Sequence[BulkDeleteResult]) -> dict[str, int]:
    deleted = sum(len(result.ids) for result in results if result.status == "deleted")
    failed = sum(len(result.ids) for result in results if result.status == "rolled_back")
    pending = sum(len(result.ids) for result in results if result.status == "pending")
    return {"deleted": deleted, "failed": failed, "pending": pending}


class BulkDelete:
    """Removes the selected rows and hands their ids to the host.

    Two-phase mode parks the rows, finalizes removal once the host callback
    returns (or its ``Future`` succeeds) and restores them when it fails.
    Optimistic mode removes them for good before the callback runs.
    """

    def __init__(
        self,
        rows: RowCollection,
        selection: RowSelection,
        on_multi_delete: DeleteCallback | None,
        *,
        mode: DeleteMode = DeleteMode.TWO_PHASE,
        table_id: str | None = None,
        logger: logging.Logger | None = None,
        is_closed: Callable[[], bool] = lambda: False,
    ) -> None:
        self.rows = rows
        self.selection = selection
        self.on_multi_delete = on_multi_delete
        self.mode = DeleteMode(mode)
        self.table_id = table_id
        self.logger = logger or get_logger(__name__)
        self.is_closed = is_closed
        self._last_error: str | None = None
        self._error_lock = threading.Lock()

    @property
    def last_error(self) -> str | None:
        with self._error_lock:
            return self._last_error

    def _record_error(self, message: str | None) -> None:
        with self._error_lock:
            self._last_error = message

    def run(self) -> BulkDeleteResult:
        ids = [row_id(row) for row in self.rows.find(self.selection.ids)]
        if not ids:
            return BulkDeleteResult()

        if self.mode is DeleteMode.OPTIMISTIC:
            self.rows.remove(ids)
        else:
            self.rows.park(ids)
        self.selection.clear()
        self._record_error(None)
        log_action(self.logger, self.table_id, "bulk_delete", "started", count=len(ids), mode=self.mode.value)

        if self.on_multi_delete is None:
            self.rows.remove(ids)
            return BulkDeleteResult(ids=ids, status="deleted")

        try:
            outcome = self.on_multi_delete(list(ids))
        except Exception as exc:
            return self._settle(ids, exc)

        if isinstance(outcome, Future):
            outcome.add_done_callback(lambda future: self._settle_future(ids, future))
            return BulkDeleteResult(ids=ids, status="pending")
        return self._settle(ids, None)

    def _settle_future(self, ids: list[Any], future: Future) -> None:
        if self.is_closed():
            return
        if future.cancelled():
            self._settle(ids, BulkActionError(code="BULK_DELETE_FAILED", message="Delete was cancelled"))
            return
        self._settle(ids, future.exception())

    def _settle(self, ids: list[Any], error: BaseException | None) -> BulkDeleteResult:
        if error is None:
            self.rows.remove(ids)
            log_action(self.logger, self.table_id, "bulk_delete", "finalized", count=len(ids))
            return BulkDeleteResult(ids=ids, status="deleted")

        wrapped = error if isinstance(error, BulkActionError) else BulkActionError(
            code="BULK_DELETE_FAILED",
            message=str(error) or error.__class__.__name__,
            details={"ids": list(ids)},
        )
        message = ErrorMapper.to_display_message(wrapped)
        self._record_error(message)
        if self.mode is DeleteMode.OPTIMISTIC:
            log_action(
                self.logger, self.table_id, "bulk_delete", "failed", level=logging.WARNING, count=len(ids), error=str(error)
            )
            return BulkDeleteResult(ids=ids, status="deleted", error=message)

        self.rows.restore(ids)
        log_action(
            self.logger, self.table_id, "bulk_delete", "rolled_back", level=logging.WARNING, count=len(ids), error=str(error)
        )
        return BulkDeleteResult(ids=ids, status="rolled_back", error=message)


def bulk_edit(
    rows: RowCollection,
    selection: RowSelection,
    on_bulk_edit: EditCallback | None,
    *,
    table_id: str | None = None,
    logger: logging.Logger | None = None,
) -> list[Any]:
    selected = rows.find(selection.ids)
    if not selected or on_bulk_edit is None:
        return []
    on_bulk_edit(list(selected))
    log_action(logger or get_logger(__name__), table_id, "bulk_edit", "requested", count=len(selected))
    return selected
