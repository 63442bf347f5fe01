from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any


class HighlightTracker:
    """Flags one just-created row for a fixed window."""

    def __init__(self, seconds: float = 10.0, now: Callable[[], float] | None = None) -> None:
        self.seconds = seconds
        self._now = now or time.monotonic
        self._row_id: Any = None
        self._expires_at = 0.0

    def mark(self, row_id: Any) -> None:
        if row_id is None:
            return
        self._row_id = row_id
        self._expires_at = self._now() + self.seconds

    @property
    def current(self) -> Any:
        if self._row_id is not None and self._expires_at <= self._now():
            self.clear()
        return self._row_id

    def is_highlighted(self, row_id: Any) -> bool:
        current = self.current
        return current is not None and current == row_id

    def clear(self) -> None:
        self._row_id = None
        self._expires_at = 0.0
