from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

ALL_SENTINEL = "all"
IDENTIFIER_KEYS = {"id", "employeeId"}


class ComparisonMode(str, Enum):
    EXACT = "exact"
    CASE_INSENSITIVE = "case_insensitive"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class DeleteMode(str, Enum):
    TWO_PHASE = "two_phase"
    OPTIMISTIC = "optimistic"


def looks_like_identifier(key: str) -> bool:
    # Substring test on the key name; "Identity" or "validId" match too.
    return key in IDENTIFIER_KEYS or "Id" in key


class FilterOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class FilterConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    options: List[FilterOption] = Field(default_factory=list)
    comparison_mode: ComparisonMode | None = None

    @property
    def resolved_mode(self) -> ComparisonMode:
        if self.comparison_mode is not None:
            return self.comparison_mode
        if looks_like_identifier(self.key):
            return ComparisonMode.EXACT
        return ComparisonMode.CASE_INSENSITIVE

    def choices(self) -> list[FilterOption]:
        return [FilterOption(value=ALL_SENTINEL, label=f"All {self.label}"), *self.options]


class SearchField(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str = Field(alias="accessorKey")
    label: str


class SortSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    desc: bool = False

    @property
    def direction(self) -> SortDirection:
        return SortDirection.DESC if self.desc else SortDirection.ASC
