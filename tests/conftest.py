from __future__ import annotations

import pytest

from hr_datatable.columns import ColumnDef, accessor_column
from hr_datatable.models import FilterConfig, FilterOption, SearchField


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def employee_rows() -> list[dict]:
    return [
        {"id": "e-1", "name": "Ann Lee", "department": "HR", "employeeId": "EMP-001", "salary": 4200, "status": "active"},
        {"id": "e-2", "name": "Ben Ortiz", "department": "IT", "employeeId": "EMP-002", "salary": 5100, "status": "active"},
        {"id": "e-3", "name": "Cid Moreno", "department": "HR", "employeeId": "EMP-003", "salary": None, "status": "inactive"},
        {"id": "e-4", "name": "Dana Shah", "department": "Finance", "employeeId": "EMP-004", "salary": 6100, "status": "active"},
    ]


@pytest.fixture()
def employee_columns() -> list[ColumnDef]:
    return [
        ColumnDef(id="select", header="", enable_sorting=False, enable_hiding=False),
        accessor_column("name", "Name"),
        accessor_column("department", "Department"),
        accessor_column("employeeId", "Employee"),
        accessor_column("salary", "Salary", cell=lambda row, value: "-" if value is None else f"{value:,}"),
        accessor_column("status", "Status"),
    ]


@pytest.fixture()
def search_fields() -> list[SearchField]:
    return [SearchField(key="name", label="Name"), SearchField(key="department", label="Department")]


@pytest.fixture()
def department_filters() -> list[FilterConfig]:
    return [
        FilterConfig(
            key="department",
            label="Departments",
            options=[FilterOption(value="HR", label="HR"), FilterOption(value="IT", label="IT")],
        ),
        FilterConfig(key="employeeId", label="Employees"),
    ]
