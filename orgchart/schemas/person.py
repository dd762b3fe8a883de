"""Person API schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from orgchart.application.dtos.person import (
    DirectoryStatistics,
    ManagerResult,
    Page,
    PersonDetailResult,
    PersonResult,
)
from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.schemas.common import CamelModel

# Columns that are NOT NULL in the person table.
_REQUIRED_FIELDS = ("name", "job_title", "department", "type", "status")


class PersonResponse(CamelModel):
    """Person as returned by list, get, create and update."""

    id: int
    name: str
    job_title: str
    department: str
    manager_id: int | None = None
    photo_path: str | None = None
    type: PersonType
    status: PersonStatus
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    hire_date: datetime | None = None
    created_at: datetime
    updated_at: datetime


class PersonDetailResponse(PersonResponse):
    """Person with their manager and direct reports."""

    manager: PersonResponse | None = None
    direct_reports: list[PersonResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: PersonDetailResult) -> "PersonDetailResponse":
        base = PersonResponse.model_validate(result.person).model_dump()
        return cls(
            **base,
            manager=PersonResponse.model_validate(result.manager)
            if result.manager
            else None,
            direct_reports=[
                PersonResponse.model_validate(p) for p in result.direct_reports
            ],
        )


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool


class PersonListResponse(CamelModel):
    """One page of people plus pagination metadata."""

    items: list[PersonResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: Page[PersonResult]) -> "PersonListResponse":
        return cls(
            items=[PersonResponse.model_validate(p) for p in page.items],
            pagination=PaginationResponse(
                page=page.page,
                limit=page.limit,
                total=page.total,
                total_pages=page.total_pages,
                has_next=page.has_next,
                has_previous=page.has_previous,
            ),
        )


class PersonCreateRequest(CamelModel):
    """Request body for creating a person."""

    name: str = Field(..., min_length=1, max_length=255)
    job_title: str = Field(..., min_length=1, max_length=255)
    department: str = Field(..., min_length=1, max_length=255)
    manager_id: int | None = Field(default=None, ge=1)
    photo_path: str | None = Field(default=None, max_length=512)
    type: PersonType = PersonType.EMPLOYEE
    status: PersonStatus = PersonStatus.ACTIVE
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=255)
    hire_date: datetime | None = None


class PersonUpdateRequest(CamelModel):
    """Request body for updating a person (partial).

    Only fields present in the body are applied; an explicit null clears an
    optional field (managerId: null makes the person a root).
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    job_title: str | None = Field(default=None, min_length=1, max_length=255)
    department: str | None = Field(default=None, min_length=1, max_length=255)
    manager_id: int | None = Field(default=None, ge=1)
    photo_path: str | None = Field(default=None, max_length=512)
    type: PersonType | None = None
    status: PersonStatus | None = None
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=255)
    hire_date: datetime | None = None

    @model_validator(mode="after")
    def _required_fields_not_null(self) -> "PersonUpdateRequest":
        for name in _REQUIRED_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_updates(self) -> dict[str, Any]:
        """Return only the fields the client sent, keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class ManagerResponse(PersonResponse):
    """Person with at least one direct report."""

    direct_reports_count: int

    @classmethod
    def from_result(cls, result: ManagerResult) -> "ManagerResponse":
        base = PersonResponse.model_validate(result.person).model_dump()
        return cls(**base, direct_reports_count=result.direct_reports_count)


class DepartmentCountResponse(CamelModel):
    name: str
    count: int


class StatisticsResponse(CamelModel):
    """Directory-wide head counts."""

    total_people: int
    total_employees: int
    total_partners: int
    total_active: int
    total_inactive: int
    departments: list[DepartmentCountResponse]

    @classmethod
    def from_result(cls, stats: DirectoryStatistics) -> "StatisticsResponse":
        return cls.model_validate(stats)
