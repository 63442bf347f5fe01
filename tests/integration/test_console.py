from __future__ import annotations

import json
from pathlib import Path

import pytest

from hr_datatable import main as console
from hr_datatable.config import TableConfig


def _feed(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    pending = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(pending))


def _write_rows(tmp_path: Path) -> Path:
    path = tmp_path / "employees.json"
    path.write_text(
        json.dumps(
            {
                "rows": [
                    {"id": 1, "name": "Ann", "department": "HR"},
                    {"id": 2, "name": "Ben", "department": "IT"},
                    {"id": 3, "name": "Cid", "department": "HR"},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def test_load_rows_and_infer_columns(tmp_path: Path) -> None:
    rows = console.load_rows(_write_rows(tmp_path))
    columns = console.infer_columns(rows)
    filters = console.build_filters(rows, ["department"])

    assert [column.id for column in columns] == ["id", "name", "department"]
    assert not columns[0].enable_hiding
    assert [option.value for option in filters[0].options] == ["HR", "IT"]


def test_console_search_filter_and_delete(tmp_path: Path, monkeypatch, capsys) -> None:
    rows = console.load_rows(_write_rows(tmp_path))
    table = console.build_table(
        rows,
        config=TableConfig(preferences_path=tmp_path / "prefs.json"),
        table_id=None,
        search_keys=["name"],
        filter_keys=["department"],
    )
    _feed(monkeypatch, ["/", "cid", "x", "3", "d", "y", "z", "7", "s", "bonus", "q", "b"])

    console.TableConsole(table, title="employees").run()

    output = capsys.readouterr().out
    assert "search: cid" in output
    assert "[delete] ids=[3]" in output
    assert "[delete] deleted: 1 row(s)" in output
    assert "[delete] session: 1 deleted, 0 failed, 0 pending" in output
    assert "[INVALID_PAGE_SIZE]" in output
    assert "[UNKNOWN_COLUMN]" in output
    assert "Unknown option." in output
    assert [row["id"] for row in table.rows.all] == [1, 2]


def test_main_reports_bad_input_file(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.json"

    assert console.main([str(missing), "--env-file", str(tmp_path / ".env")]) == 2
    assert "error:" in capsys.readouterr().out


def test_main_runs_console_and_persists_visibility(tmp_path: Path, monkeypatch, capsys) -> None:
    prefs = tmp_path / "prefs.json"
    monkeypatch.setenv("HR_TABLE_PREFERENCES_PATH", str(prefs))
    monkeypatch.delenv("HR_TABLE_PREFERENCES_URL", raising=False)
    _feed(monkeypatch, ["v", "department", "n", "b"])

    exit_code = console.main([str(_write_rows(tmp_path)), "--table-id", "employees", "--env-file", str(tmp_path / ".env")])

    assert exit_code == 0
    assert json.loads(prefs.read_text(encoding="utf-8")) == {
        "table-column-visibility-employees": {"department": False}
    }
