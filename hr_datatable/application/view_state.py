"""Interactive state of one table instance.

Each operation replaces the slice it touches; reads elsewhere recompute the
visible rows from the full row set.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from hr_datatable.application.bulk_actions import RowSelection
from hr_datatable.application.column_visibility import ColumnVisibility
from hr_datatable.application.highlight import HighlightTracker
from hr_datatable.columns import ColumnSet
from hr_datatable.config import TableConfig
from hr_datatable.filters import clean_filters
from hr_datatable.infrastructure.logging.logger import get_logger, log_action
from hr_datatable.infrastructure.preferences.store import PreferenceStore
from hr_datatable.models import FilterConfig, SortSpec
from hr_datatable.sorting import toggle_sorting
from hr_datatable.ui import pagination
from hr_datatable.ui.pagination import PaginationState

FilterChangeCallback = Callable[[str, str], Any]

DEPENDENT_FILTER_KEY = "employeeId"


class ViewStateStore:
    def __init__(
        self,
        columns: ColumnSet,
        *,
        row_count: Callable[[], int],
        config: TableConfig | None = None,
        sorting: Sequence[SortSpec] = (),
        filters: Iterable[FilterConfig] = (),
        table_id: str | None = None,
        preference_store: PreferenceStore | None = None,
        on_filter_change: FilterChangeCallback | None = None,
        now: Callable[[], float] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.columns = columns
        self.config = config or TableConfig()
        self.table_id = table_id
        self.logger = logger or get_logger(__name__)
        self.on_filter_change = on_filter_change
        self.filter_configs = {config.key: config for config in filters}
        self._row_count = row_count

        self.search = ""
        self.active_filters: dict[str, str] = {}
        self.sorting: list[SortSpec] = list(sorting)
        self.pagination = PaginationState(page_index=0, page_size=self.config.default_page_size)
        self.visibility = ColumnVisibility(columns, table_id=table_id, store=preference_store, logger=self.logger)
        self.selection = RowSelection()
        self.highlight = HighlightTracker(seconds=self.config.highlight_seconds, now=now)

        self._reset_key_value: Any = None

    # search and filters

    def set_search(self, text: str) -> None:
        self.search = text or ""
        self._after_filter_change()

    def clear_search(self) -> None:
        self.set_search("")

    def set_filter(self, key: str, value: str) -> None:
        self.active_filters = {**self.active_filters, key: value}
        if self.on_filter_change is not None:
            self.on_filter_change(key, value)
        self._after_filter_change()

    def clear_filter(self, key: str) -> None:
        self.active_filters = {name: value for name, value in self.active_filters.items() if name != key}
        self._after_filter_change()

    @property
    def effective_filters(self) -> dict[str, str]:
        return clean_filters(self.active_filters)

    def set_reset_filter_key(self, value: Any) -> bool:
        """Track the upstream filter value; a change clears the dependent filter.

        The first assignment only records the value. Returns True when the
        dependent ``employeeId`` filter was cleared.
        """
        previous = self._reset_key_value
        self._reset_key_value = value
        if value is None or previous is None or previous == value:
            return False
        if DEPENDENT_FILTER_KEY not in self.filter_configs or not self.active_filters.get(DEPENDENT_FILTER_KEY):
            return False
        self.active_filters = {
            name: filter_value for name, filter_value in self.active_filters.items() if name != DEPENDENT_FILTER_KEY
        }
        log_action(self.logger, self.table_id, "filters.reset_dependent", "cleared", key=DEPENDENT_FILTER_KEY)
        self._after_filter_change()
        return True

    def _after_filter_change(self) -> None:
        if self.config.reset_page_on_filter_change:
            self.pagination.page_index = 0

    # sorting

    def toggle_sort(self, column_id: str) -> list[SortSpec]:
        column = self.columns.require(column_id)
        if column.can_sort:
            self.sorting = toggle_sorting(self.sorting, column_id)
        return list(self.sorting)

    def set_sorting(self, specs: Sequence[SortSpec]) -> None:
        for spec in specs:
            self.columns.require(spec.id)
        if not specs and self.sorting:
            # Sorting removal is disabled once a column sorts the table.
            return
        self.sorting = list(specs)

    def sort_direction(self, column_id: str) -> str | None:
        for spec in self.sorting:
            if spec.id == column_id:
                return spec.direction.value
        return None

    # pagination

    @property
    def page_count(self) -> int:
        return pagination.page_count(self._row_count(), self.pagination.page_size)

    def set_page_index(self, page_index: int) -> None:
        pagination.goto_page(self.pagination, page_index, self._row_count())

    def set_page_size(self, page_size: int) -> None:
        pagination.change_page_size(self.pagination, page_size, self._row_count(), self.config.page_size_options)

    def first_page(self) -> None:
        self.set_page_index(0)

    def previous_page(self) -> None:
        pagination.prev_page(self.pagination, self._row_count())

    def next_page(self) -> None:
        pagination.next_page(self.pagination, self._row_count())

    def last_page(self) -> None:
        self.set_page_index(self.page_count - 1)

    # column visibility

    def toggle_column_visibility(self, column_id: str, visible: bool) -> bool:
        return self.visibility.toggle(column_id, visible)

    # selection

    def select(self, row_id: Any) -> None:
        self.selection.select(row_id)

    def deselect(self, row_id: Any) -> None:
        self.selection.deselect(row_id)

    def toggle_selection(self, row_id: Any) -> bool:
        return self.selection.toggle(row_id)

    def select_all_on_page(self, row_ids: Iterable[Any]) -> None:
        self.selection.select_many(row_ids)

    def clear_selection(self) -> None:
        self.selection.clear()

    def snapshot(self) -> dict[str, Any]:
        return {
            "search": self.search,
            "active_filters": dict(self.active_filters),
            "sorting": [spec.model_dump() for spec in self.sorting],
            "pagination": {"page_index": self.pagination.page_index, "page_size": self.pagination.page_size},
            "column_visibility": self.visibility.state,
            "row_selection": self.selection.ids,
            "highlighted_id": self.highlight.current,
        }

    def close(self) -> None:
        self.visibility.close()
