from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Protocol

COLUMN_VISIBILITY_PREFIX = "table-column-visibility-"


def column_visibility_key(table_id: str) -> str:
    return f"{COLUMN_VISIBILITY_PREFIX}{table_id}"


class PreferenceStore(Protocol):
    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...


@dataclass
class InMemoryPreferenceStore:
    values: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Any | None:
        value = self.values.get(key)
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = copy.deepcopy(value)
