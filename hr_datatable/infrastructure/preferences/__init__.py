from __future__ import annotations

from hr_datatable.config import TableConfig

from .file_store import JsonFilePreferenceStore
from .http_store import HttpPreferenceStore
from .store import COLUMN_VISIBILITY_PREFIX, InMemoryPreferenceStore, PreferenceStore, column_visibility_key


def build_preference_store(config: TableConfig, *, token: str | None = None) -> PreferenceStore:
    if config.preferences_url:
        return HttpPreferenceStore(config.preferences_url, token=token, timeout_seconds=config.http_timeout_seconds)
    return JsonFilePreferenceStore(config.preferences_path)


__all__ = [
    "COLUMN_VISIBILITY_PREFIX",
    "HttpPreferenceStore",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "PreferenceStore",
    "build_preference_store",
    "column_visibility_key",
]
