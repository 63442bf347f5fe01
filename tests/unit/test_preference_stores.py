from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from hr_datatable.config import TableConfig
from hr_datatable.exceptions import PreferenceStoreError
from hr_datatable.infrastructure.preferences import (
    HttpPreferenceStore,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    build_preference_store,
    column_visibility_key,
)


def test_column_visibility_key() -> None:
    assert column_visibility_key("employees") == "table-column-visibility-employees"


def test_in_memory_store_copies_values() -> None:
    store = InMemoryPreferenceStore()
    value = {"salary": False}
    store.set("k", value)
    value["salary"] = True

    assert store.get("k") == {"salary": False}
    assert store.get("missing") is None


def test_json_file_store_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "prefs.json"
    store = JsonFilePreferenceStore(path)

    store.set("a", {"status": False})
    store.set("b", 1)

    assert JsonFilePreferenceStore(path).get("a") == {"status": False}
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": {"status": False}, "b": 1}

    store.clear()
    assert store.get("a") is None


def test_json_file_store_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")

    assert JsonFilePreferenceStore(path).get("a") is None


def test_json_file_store_write_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = JsonFilePreferenceStore(blocker / "prefs.json")

    with pytest.raises(PreferenceStoreError) as exc_info:
        store.set("a", True)

    assert exc_info.value.code == "PREFERENCE_WRITE_FAILED"


def _http_store(handler) -> HttpPreferenceStore:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpPreferenceStore("https://hr.example.test/api/", client=client)


def test_http_store_reads_once_and_writes_per_key() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "GET":
            return httpx.Response(200, json={"preferences": {"table-column-visibility-employees": {"salary": False}}})
        return httpx.Response(204)

    store = _http_store(handler)

    assert store.get("table-column-visibility-employees") == {"salary": False}
    assert store.get("other") is None
    store.set("table-column-visibility-employees", {"salary": True})

    assert [request.method for request in requests] == ["GET", "PUT"]
    assert requests[0].url.path == "/api/preferences"
    assert requests[1].url.path == "/api/preferences/table-column-visibility-employees"
    assert json.loads(requests[1].content) == {"value": {"salary": True}}
    assert store.get("table-column-visibility-employees") == {"salary": True}


def test_http_store_errors_are_wrapped() -> None:
    store = _http_store(lambda request: httpx.Response(503, json={"detail": "down"}))

    with pytest.raises(PreferenceStoreError) as read_error:
        store.get("a")
    with pytest.raises(PreferenceStoreError) as write_error:
        store.set("a", True)

    assert read_error.value.code == "PREFERENCE_READ_FAILED"
    assert write_error.value.code == "PREFERENCE_WRITE_FAILED"


def test_build_preference_store_picks_backend(tmp_path: Path) -> None:
    file_store = build_preference_store(TableConfig(preferences_path=tmp_path / "p.json"))
    http_store = build_preference_store(TableConfig(preferences_url="https://hr.example.test/api"), token="t")

    assert isinstance(file_store, JsonFilePreferenceStore)
    assert isinstance(http_store, HttpPreferenceStore)
    http_store.close()
