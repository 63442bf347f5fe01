from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Sequence

from hr_datatable.accessors import row_id
from hr_datatable.application.bulk_actions import BulkDeleteResult, summarize_bulk_results
from hr_datatable.columns import ColumnDef, accessor_column
from hr_datatable.config import ConfigError, TableConfig, load_config
from hr_datatable.data_table import DataTable
from hr_datatable.exceptions import DataTableError
from hr_datatable.infrastructure.errors.error_mapper import ErrorMapper
from hr_datatable.models import FilterConfig, FilterOption, SearchField
from hr_datatable.ui.rendering import render_table
from hr_datatable.ui.table_printer import print_table

COMMANDS = (
    "Commands: /=search, f=filter, c=clear, s=sort, n=next, p=prev, g=goto, z=page size, "
    "v=columns, x=select row, a=select page, e=edit, d=delete, b=back"
)


def load_rows(path: Path) -> list[dict[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("rows") or payload.get("items") or []
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON array of rows")
    return [row for row in payload if isinstance(row, dict)]


def infer_columns(rows: Sequence[dict[str, Any]]) -> list[ColumnDef]:
    keys: dict[str, None] = {}
    for row in rows:
        keys.update({key: None for key in row})
    return [accessor_column(key, enable_hiding=key != "id") for key in keys]


def build_filters(rows: Sequence[dict[str, Any]], keys: Sequence[str]) -> list[FilterConfig]:
    filters = []
    for key in keys:
        values = sorted({str(row[key]) for row in rows if row.get(key) not in (None, "")})
        options = [FilterOption(value=value, label=value) for value in values]
        filters.append(FilterConfig(key=key, label=key.replace("_", " ").title(), options=options))
    return filters


class TableConsole:
    def __init__(self, table: DataTable, title: str = "Rows") -> None:
        self.table = table
        self.title = title
        self.delete_results: list[BulkDeleteResult] = []

    def _find_row_id(self, raw: str) -> Any:
        for row in self.table.rows.all:
            if str(row_id(row)) == raw:
                return row_id(row)
        return None

    def run(self) -> None:
        while True:
            print()
            print_table(render_table(self.table), self.title)
            print(COMMANDS)
            command = input("cmd: ").strip().lower()
            try:
                if command == "b":
                    return
                self.dispatch(command)
            except DataTableError as error:
                print(ErrorMapper.to_display_message(error))

    def dispatch(self, command: str) -> None:
        state = self.table.state
        if command == "/":
            state.set_search(input("search: ").strip())
        elif command == "f":
            key = input("filter key: ").strip()
            state.set_filter(key, input(f"{key} value (all = none): ").strip() or "all")
        elif command == "c":
            state.clear_search()
            for key in list(state.active_filters):
                state.clear_filter(key)
        elif command == "s":
            state.toggle_sort(input("column: ").strip())
        elif command == "n":
            state.next_page()
        elif command == "p":
            state.previous_page()
        elif command == "g":
            candidates = self.table.jump_candidates(input("go to page: ").strip())
            if len(candidates) == 1:
                state.set_page_index(candidates[0] - 1)
            else:
                print("Pages: " + ", ".join(str(page) for page in candidates[:20]))
        elif command == "z":
            requested = input("rows per page: ").strip()
            if requested.isdigit():
                state.set_page_size(int(requested))
        elif command == "v":
            column_id = input("column: ").strip()
            visible = input("show? (y/n): ").strip().lower() == "y"
            state.toggle_column_visibility(column_id, visible)
        elif command == "x":
            identifier = self._find_row_id(input("row id: ").strip())
            if identifier is not None:
                state.toggle_selection(identifier)
        elif command == "a":
            self.table.select_page()
        elif command == "e":
            self.table.bulk_edit()
        elif command == "d":
            if input("Delete selected rows? (y/n): ").strip().lower() == "y":
                result = self.table.bulk_delete()
                self.delete_results.append(result)
                totals = summarize_bulk_results(self.delete_results)
                print(f"[delete] {result.status}: {len(result.ids)} row(s)")
                print(
                    f"[delete] session: {totals['deleted']} deleted, "
                    f"{totals['failed']} failed, {totals['pending']} pending"
                )
        else:
            print("Unknown option.")


def build_table(
    rows: list[dict[str, Any]],
    *,
    config: TableConfig,
    table_id: str | None,
    search_keys: Sequence[str] = (),
    filter_keys: Sequence[str] = (),
) -> DataTable:
    return DataTable(
        infer_columns(rows),
        rows,
        search_fields=[SearchField(key=key, label=key.replace("_", " ").title()) for key in search_keys],
        filters=build_filters(rows, filter_keys),
        table_id=table_id,
        on_multi_delete=lambda ids: print(f"[delete] ids={ids}"),
        on_bulk_edit=lambda items: print(f"[edit] {len(items)} row(s) selected for editing"),
        config=config,
    )


def _split(raw: str | None) -> list[str]:
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Browse a JSON array of records as a table.")
    parser.add_argument("rows", type=Path, help="JSON file with the rows")
    parser.add_argument("--table-id", help="persist column visibility under this id")
    parser.add_argument("--search", help="comma separated search fields")
    parser.add_argument("--filters", help="comma separated filter keys")
    parser.add_argument("--env-file", help="optional .env file")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.env_file)
        rows = load_rows(args.rows)
    except (ConfigError, ValueError, OSError) as error:
        print(f"error: {error}")
        return 2

    with build_table(
        rows,
        config=config,
        table_id=args.table_id,
        search_keys=_split(args.search),
        filter_keys=_split(args.filters),
    ) as table:
        TableConsole(table, title=args.rows.stem).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
