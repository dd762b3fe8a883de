"""DTOs for person use cases (no dependency on ORM)."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, Literal, TypeVar

from orgchart.domain.enums import PersonStatus, PersonType

PersonSortField = Literal["name", "job_title", "department", "created_at", "updated_at"]
SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class PersonResult:
    """Person read-model (result of get_by_id, find_direct_reports, create_person, etc.)."""

    id: int
    name: str
    job_title: str
    department: str
    manager_id: int | None
    photo_path: str | None
    type: PersonType
    status: PersonStatus
    email: str | None
    phone: str | None
    location: str | None
    hire_date: datetime | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PersonDetailResult:
    """Person with manager and direct reports (name ascending)."""

    person: PersonResult
    manager: PersonResult | None
    direct_reports: list[PersonResult]


@dataclass(frozen=True)
class ManagerResult:
    """Person who has at least one direct report."""

    person: PersonResult
    direct_reports_count: int


@dataclass(frozen=True)
class PersonCreate:
    """Input for creating a person."""

    name: str
    job_title: str
    department: str
    manager_id: int | None = None
    photo_path: str | None = None
    type: PersonType = PersonType.EMPLOYEE
    status: PersonStatus = PersonStatus.ACTIVE
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    hire_date: datetime | None = None


@dataclass(frozen=True)
class PersonFilter:
    """List/count filter. search is a case-insensitive substring on name, job title, email."""

    search: str | None = None
    department: str | None = None
    manager_id: int | None = None
    type: PersonType | None = None
    status: PersonStatus | None = None


@dataclass(frozen=True)
class PeopleQuery:
    """Paginated list query."""

    page: int = 1
    limit: int = 10
    filter: PersonFilter = field(default_factory=PersonFilter)
    sort_by: PersonSortField = "name"
    sort_order: SortOrder = "asc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus totals."""

    items: list[T]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


@dataclass(frozen=True)
class DepartmentCount:
    name: str
    count: int


@dataclass(frozen=True)
class DirectoryStatistics:
    """Directory-wide counts for the dashboard."""

    total_people: int
    total_employees: int
    total_partners: int
    total_active: int
    total_inactive: int
    departments: list[DepartmentCount]
