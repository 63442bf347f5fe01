from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from hr_datatable.data_table import DataTable
from hr_datatable.models import SortSpec
from hr_datatable.ui.listing_view import EMPTY_VALUE, normalize_value
from hr_datatable.ui.rendering import EMPTY_HINT, EMPTY_TITLE, highlight_segments, render_table
from hr_datatable.ui.table_printer import format_table


def test_highlight_segments_marks_each_match() -> None:
    assert highlight_segments("Ann Lee", "e") == [("Ann L", False), ("e", True), ("e", True)]
    assert highlight_segments("a.b", ".") == [("a", False), (".", True), ("b", False)]
    assert highlight_segments("Ben", "") == [("Ben", False)]
    assert highlight_segments("", "x") == []


def test_normalize_value() -> None:
    assert normalize_value(None) == EMPTY_VALUE
    assert normalize_value(" active ") == "ACTIVE"
    assert normalize_value(True) == "Yes"
    assert normalize_value(Decimal("1234.5")) == "1,234.50"
    assert normalize_value(datetime(2026, 3, 1, 9, 30)) == "2026-03-01 09:30"
    assert normalize_value(date(2026, 3, 1)) == "2026-03-01"
    assert normalize_value(["HR", None, "IT"]) == "HR, IT"


def test_render_table_marks_rows_and_headers(employee_columns, employee_rows, search_fields, department_filters, clock) -> None:
    table = DataTable(
        employee_columns,
        employee_rows,
        sorting=[SortSpec(id="name", desc=True)],
        search_fields=search_fields,
        filters=department_filters,
        new_item_id="e-2",
        on_multi_delete=lambda ids: None,
        now=clock,
    )
    table.state.select("e-4")

    rendered = render_table(table)

    assert [row.row_id for row in rendered.rows] == ["e-4", "e-3", "e-2", "e-1"]
    assert [row.striped for row in rendered.rows] == [False, True, False, True]
    assert rendered.rows[0].selected
    assert rendered.rows[2].highlighted
    assert rendered.rows[1].cells[4] == "-"
    name_header = next(header for header in rendered.headers if header.column_id == "name")
    assert name_header.sort_direction == "desc"
    assert rendered.toolbar.search_placeholder == "Search by Name, Department"
    assert rendered.toolbar.bulk_actions == ["Delete (1)"]
    assert rendered.toolbar.filters[0].options[0].label == "All Departments"
    assert rendered.range_label == "1-4 of 4"
    assert rendered.empty_message is None


def test_empty_state_and_text_output(employee_columns, employee_rows, search_fields) -> None:
    table = DataTable(employee_columns, employee_rows, search_fields=search_fields)
    table.state.set_search("nobody")

    rendered = render_table(table)
    text = format_table(rendered, title="Employees")

    assert rendered.rows == []
    assert rendered.empty_message == (EMPTY_TITLE, EMPTY_HINT)
    assert text.splitlines()[0] == "Employees"
    assert "(No results found)" in text
    assert "search: nobody" in text


def test_text_output_has_footer(employee_columns, employee_rows) -> None:
    table = DataTable(employee_columns, employee_rows, sorting=[SortSpec(id="name")])

    text = format_table(render_table(table))

    assert "Name ^" in text
    assert text.splitlines()[-1] == "1-4 of 4   pages: [1]   rows per page: 10"
