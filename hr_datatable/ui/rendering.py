from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from hr_datatable.accessors import row_id
from hr_datatable.models import ALL_SENTINEL, FilterOption
from hr_datatable.ui.pagination import PageLabel, can_next, can_previous

if TYPE_CHECKING:
    from hr_datatable.data_table import DataTable

EMPTY_TITLE = "No results found"
EMPTY_HINT = "Try adjusting your search or filters"


@dataclass(frozen=True)
class HeaderCell:
    column_id: str
    label: str
    width: int | None = None
    sortable: bool = False
    sort_direction: str | None = None


@dataclass(frozen=True)
class RenderedRow:
    row_id: Any
    cells: list[str]
    selected: bool = False
    highlighted: bool = False
    striped: bool = False


@dataclass(frozen=True)
class FilterControl:
    key: str
    label: str
    value: str
    options: list[FilterOption]


@dataclass(frozen=True)
class Toolbar:
    search: str = ""
    search_placeholder: str | None = None
    filters: list[FilterControl] = field(default_factory=list)
    bulk_actions: list[str] = field(default_factory=list)
    hideable_columns: list[tuple[str, bool]] = field(default_factory=list)


@dataclass(frozen=True)
class RenderedTable:
    headers: list[HeaderCell]
    rows: list[RenderedRow]
    toolbar: Toolbar
    page_labels: list[PageLabel]
    current_page: int
    range_label: str
    page_size: int
    page_size_options: tuple[int, ...]
    can_previous: bool
    can_next: bool
    empty_message: tuple[str, str] | None = None
    error: str | None = None


def highlight_segments(text: str, search: str) -> list[tuple[str, bool]]:
    """Split ``text`` into (part, matched) pieces for the current search."""
    if not search or not text:
        return [(text, False)] if text else []
    pattern = re.compile(f"({re.escape(search)})", re.IGNORECASE)
    return [(part, bool(pattern.fullmatch(part))) for part in pattern.split(text) if part]


def search_placeholder(table: "DataTable") -> str | None:
    if not table.search_fields:
        return None
    return "Search by " + ", ".join(field.label for field in table.search_fields)


def build_toolbar(table: "DataTable") -> Toolbar:
    filters = [
        FilterControl(
            key=config.key,
            label=config.label,
            value=table.state.active_filters.get(config.key) or ALL_SENTINEL,
            options=config.choices(),
        )
        for config in table.filter_configs
    ]
    selected = len(table.selected_rows())
    actions: list[str] = []
    if selected:
        if table.can_bulk_edit:
            actions.append(f"Edit ({selected})")
        if table.can_bulk_delete:
            actions.append(f"Delete ({selected})")
    visibility = table.state.visibility
    hideable = [(column.id, visibility.is_visible(column.id)) for column in visibility.hideable_columns()]
    return Toolbar(
        search=table.state.search,
        search_placeholder=search_placeholder(table),
        filters=filters,
        bulk_actions=actions,
        hideable_columns=hideable,
    )


def render_table(table: "DataTable") -> RenderedTable:
    columns = table.visible_columns()
    headers = [
        HeaderCell(
            column_id=column.id,
            label=column.header_text(),
            width=column.size,
            sortable=column.can_sort,
            sort_direction=table.state.sort_direction(column.id),
        )
        for column in columns
    ]

    highlighted = table.highlighted_id
    selection = table.state.selection
    rows = []
    for index, row in enumerate(table.page_rows()):
        identifier = row_id(row)
        rows.append(
            RenderedRow(
                row_id=identifier,
                cells=[column.render_cell(row) for column in columns],
                selected=identifier in selection,
                highlighted=highlighted is not None and identifier == highlighted,
                striped=index % 2 == 1,
            )
        )

    state = table.state.pagination
    total = table.row_count
    return RenderedTable(
        headers=headers,
        rows=rows,
        toolbar=build_toolbar(table),
        page_labels=table.page_numbers(),
        current_page=state.page_index + 1,
        range_label=table.range_label(),
        page_size=state.page_size,
        page_size_options=tuple(table.config.page_size_options),
        can_previous=can_previous(state),
        can_next=can_next(state, total),
        empty_message=None if rows else (EMPTY_TITLE, EMPTY_HINT),
        error=table.last_error,
    )
