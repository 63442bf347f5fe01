from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from hr_datatable.exceptions import PreferenceStoreError


class JsonFilePreferenceStore:
    """Preferences kept as one JSON object per user profile file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return payload if isinstance(payload, dict) else {}
        except (ValueError, OSError):
            return {}

    def get(self, key: str) -> Any | None:
        return self.load().get(key)

    def set(self, key: str, value: Any) -> None:
        payload = self.load()
        payload[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise PreferenceStoreError(
                code="PREFERENCE_WRITE_FAILED",
                message=f"Could not write preferences to {self.path}",
                details={"key": key, "reason": str(exc)},
            ) from exc

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
