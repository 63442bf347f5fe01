from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from hr_datatable.accessors import row_id
from hr_datatable.application.bulk_actions import (
    BulkDelete,
    BulkDeleteResult,
    DeleteCallback,
    EditCallback,
    RowCollection,
    bulk_edit,
)
from hr_datatable.application.view_state import FilterChangeCallback, ViewStateStore
from hr_datatable.columns import ColumnDef, ColumnSet
from hr_datatable.config import TableConfig
from hr_datatable.filters import FilterPredicate
from hr_datatable.infrastructure.logging.logger import get_logger
from hr_datatable.infrastructure.preferences import PreferenceStore, build_preference_store
from hr_datatable.models import DeleteMode, FilterConfig, SearchField, SortSpec
from hr_datatable.sorting import sort_rows
from hr_datatable.ui import pagination


class DataTable:
    """Searchable, filterable, sortable, paged view over in-memory rows.

    Every read recomputes ``sort(filter(rows))`` from the full row set and
    slices the current page out of it. Rows must expose a unique ``id``.

    A ``table_id`` without an explicit ``preference_store`` persists column
    visibility through the store named by ``config``.
    """

    def __init__(
        self,
        columns: Sequence[ColumnDef],
        data: Iterable[Any],
        *,
        sorting: Sequence[SortSpec] = (),
        search_fields: Sequence[SearchField | dict] = (),
        filters: Sequence[FilterConfig | dict] = (),
        table_id: str | None = None,
        preference_store: PreferenceStore | None = None,
        on_multi_delete: DeleteCallback | None = None,
        on_bulk_edit: EditCallback | None = None,
        on_filter_change: FilterChangeCallback | None = None,
        reset_filter_key: Any = None,
        new_item_id: Any = None,
        delete_mode: DeleteMode | str | None = None,
        config: TableConfig | None = None,
        now: Callable[[], float] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or TableConfig()
        self.columns = ColumnSet(columns)
        self.table_id = table_id
        self.logger = logger or get_logger(__name__)
        self.search_fields = [
            field if isinstance(field, SearchField) else SearchField.model_validate(field) for field in search_fields
        ]
        self.filter_configs = [
            item if isinstance(item, FilterConfig) else FilterConfig.model_validate(item) for item in filters
        ]
        self.rows = RowCollection(data)
        if table_id and preference_store is None:
            preference_store = build_preference_store(self.config)
        self._closed = False

        self.state = ViewStateStore(
            self.columns,
            row_count=lambda: len(self.filtered_rows()),
            config=self.config,
            sorting=sorting,
            filters=self.filter_configs,
            table_id=table_id,
            preference_store=preference_store,
            on_filter_change=on_filter_change,
            now=now,
            logger=self.logger,
        )
        self.state.set_reset_filter_key(reset_filter_key)
        self.state.highlight.mark(new_item_id)

        self.on_bulk_edit = on_bulk_edit
        self._bulk_delete = BulkDelete(
            self.rows,
            self.state.selection,
            on_multi_delete,
            mode=DeleteMode(delete_mode or self.config.delete_mode),
            table_id=table_id,
            logger=self.logger,
            is_closed=lambda: self._closed,
        )

    def __enter__(self) -> "DataTable":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # host inputs

    def set_data(self, rows: Iterable[Any]) -> None:
        self.rows.replace(rows)

    def set_new_item(self, new_item_id: Any) -> None:
        self.state.highlight.mark(new_item_id)

    def set_reset_filter_key(self, value: Any) -> bool:
        return self.state.set_reset_filter_key(value)

    # pipeline

    def predicate(self) -> FilterPredicate:
        return FilterPredicate(
            columns=self.columns,
            search=self.state.search,
            active_filters=self.state.active_filters,
            search_fields=self.search_fields,
            filter_configs=self.filter_configs,
        )

    def filtered_rows(self) -> list[Any]:
        return self.predicate().apply(self.rows.all)

    def sorted_rows(self) -> list[Any]:
        return sort_rows(self.filtered_rows(), self.state.sorting, self.columns)

    def page_rows(self) -> list[Any]:
        return pagination.page_slice(self.sorted_rows(), self.state.pagination)

    @property
    def row_count(self) -> int:
        return len(self.filtered_rows())

    @property
    def page_count(self) -> int:
        return self.state.page_count

    def visible_columns(self) -> list[ColumnDef]:
        return self.state.visibility.visible_columns()

    def page_numbers(self) -> list[pagination.PageLabel]:
        return pagination.page_numbers(self.state.pagination.page_index, self.page_count)

    def jump_candidates(self, query: str = "") -> list[int]:
        return pagination.jump_candidates(self.page_count, query)

    def range_label(self) -> str:
        return pagination.range_label(self.state.pagination, self.row_count)

    # selection and bulk actions

    def select_page(self) -> None:
        self.state.select_all_on_page(row_id(row) for row in self.page_rows())

    def selected_rows(self) -> list[Any]:
        return self.rows.find(self.state.selection.ids)

    def bulk_delete(self) -> BulkDeleteResult:
        return self._bulk_delete.run()

    def bulk_edit(self) -> list[Any]:
        return bulk_edit(
            self.rows, self.state.selection, self.on_bulk_edit, table_id=self.table_id, logger=self.logger
        )

    @property
    def can_bulk_delete(self) -> bool:
        return self._bulk_delete.on_multi_delete is not None

    @property
    def can_bulk_edit(self) -> bool:
        return self.on_bulk_edit is not None

    @property
    def last_error(self) -> str | None:
        return self._bulk_delete.last_error

    @property
    def highlighted_id(self) -> Any:
        return self.state.highlight.current

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True
        self.state.close()
