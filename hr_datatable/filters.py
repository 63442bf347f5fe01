"""Combined search and column-filter predicate.

A row is visible when it matches the free-text search in at least one search
field and matches every active filter.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from hr_datatable.accessors import as_text
from hr_datatable.columns import ColumnSet
from hr_datatable.models import ALL_SENTINEL, ComparisonMode, FilterConfig, SearchField, looks_like_identifier


def clean_filters(filters: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in filters.items() if value not in (None, "", ALL_SENTINEL)}


def comparison_mode_for(key: str, filter_configs: Mapping[str, FilterConfig]) -> ComparisonMode:
    config = filter_configs.get(key)
    if config is not None:
        return config.resolved_mode
    return ComparisonMode.EXACT if looks_like_identifier(key) else ComparisonMode.CASE_INSENSITIVE


def matches_search(row: Any, search: str, search_fields: Sequence[SearchField], columns: ColumnSet) -> bool:
    if not search or not search_fields:
        return True
    needle = search.lower()
    return any(needle in as_text(columns.lookup(row, field.key)).lower() for field in search_fields)


def matches_filter(row_value: Any, filter_value: Any, mode: ComparisonMode) -> bool:
    row_text = as_text(row_value).strip()
    filter_text = as_text(filter_value).strip()
    if not row_text and not filter_text:
        return True
    if mode is ComparisonMode.EXACT:
        return row_text == filter_text
    return row_text.lower() == filter_text.lower()


def matches_filters(
    row: Any,
    active_filters: Mapping[str, Any],
    columns: ColumnSet,
    filter_configs: Mapping[str, FilterConfig],
) -> bool:
    for key, value in active_filters.items():
        if not value or value == ALL_SENTINEL:
            continue
        mode = comparison_mode_for(key, filter_configs)
        if not matches_filter(columns.lookup(row, key), value, mode):
            return False
    return True


class FilterPredicate:
    """Snapshot of search and filter inputs, callable on a row."""

    def __init__(
        self,
        *,
        columns: ColumnSet,
        search: str = "",
        active_filters: Mapping[str, Any] | None = None,
        search_fields: Sequence[SearchField] = (),
        filter_configs: Iterable[FilterConfig] = (),
    ) -> None:
        self.columns = columns
        self.search = search
        self.active_filters = dict(active_filters or {})
        self.search_fields = tuple(search_fields)
        self.filter_configs = {config.key: config for config in filter_configs}

    @property
    def is_noop(self) -> bool:
        searching = bool(self.search and self.search_fields)
        return not searching and not clean_filters(self.active_filters)

    def __call__(self, row: Any) -> bool:
        if not matches_search(row, self.search, self.search_fields, self.columns):
            return False
        return matches_filters(row, self.active_filters, self.columns, self.filter_configs)

    def apply(self, rows: Iterable[Any]) -> list[Any]:
        if self.is_noop:
            return list(rows)
        return [row for row in rows if self(row)]
