from .application.bulk_actions import BulkDeleteResult, RowSelection
from .application.view_state import ViewStateStore
from .columns import ColumnDef, ColumnSet, accessor_column
from .config import PAGE_SIZE_OPTIONS, ConfigError, TableConfig, load_config
from .data_table import DataTable
from .exceptions import (
    BulkActionError,
    DataTableError,
    InvalidPageSizeError,
    PreferenceStoreError,
    UnknownColumnError,
)
from .filters import FilterPredicate, clean_filters
from .infrastructure.preferences import (
    HttpPreferenceStore,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
    column_visibility_key,
)
from .models import (
    ALL_SENTINEL,
    ComparisonMode,
    DeleteMode,
    FilterConfig,
    FilterOption,
    SearchField,
    SortDirection,
    SortSpec,
)
from .ui.pagination import ELLIPSIS, PaginationState, jump_candidates, page_numbers
from .ui.rendering import RenderedTable, highlight_segments, render_table
from .ui.table_printer import format_table

__all__ = [
    "ALL_SENTINEL",
    "BulkActionError",
    "BulkDeleteResult",
    "ColumnDef",
    "ColumnSet",
    "ComparisonMode",
    "ConfigError",
    "DataTable",
    "DataTableError",
    "DeleteMode",
    "ELLIPSIS",
    "FilterConfig",
    "FilterOption",
    "FilterPredicate",
    "HttpPreferenceStore",
    "InMemoryPreferenceStore",
    "InvalidPageSizeError",
    "JsonFilePreferenceStore",
    "PAGE_SIZE_OPTIONS",
    "PaginationState",
    "PreferenceStore",
    "PreferenceStoreError",
    "RenderedTable",
    "RowSelection",
    "SearchField",
    "SortDirection",
    "SortSpec",
    "TableConfig",
    "UnknownColumnError",
    "ViewStateStore",
    "accessor_column",
    "clean_filters",
    "column_visibility_key",
    "format_table",
    "highlight_segments",
    "jump_candidates",
    "load_config",
    "page_numbers",
    "render_table",
]
