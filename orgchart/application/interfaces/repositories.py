"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from orgchart.application.dtos.person import (
        DepartmentCount,
        ManagerResult,
        PeopleQuery,
        PersonCreate,
        PersonFilter,
        PersonResult,
    )


class IPersonRepository(Protocol):
    """Protocol for the person store (DIP).

    get_by_id, find_direct_reports and find_root_person are all the
    hierarchy core needs; the rest backs the people endpoints.
    """

    async def get_by_id(self, person_id: int) -> PersonResult | None:
        """Return person by ID."""

    async def find_direct_reports(self, manager_id: int) -> list[PersonResult]:
        """Return people whose manager_id is manager_id (no duplicate ids)."""

    async def find_root_person(self) -> PersonResult | None:
        """Return the person with no manager (lowest id when several exist)."""

    async def exists(self, person_id: int) -> bool:
        """Return whether a person with this ID exists."""

    async def list_people(self, query: PeopleQuery) -> tuple[list[PersonResult], int]:
        """Return one page of people matching the query and the total match count."""

    async def count(self, filter: PersonFilter | None = None) -> int:
        """Return number of people matching filter (all people when None)."""

    async def get_departments(self) -> list[str]:
        """Return distinct department names, ascending."""

    async def get_department_counts(self) -> list[DepartmentCount]:
        """Return head count per department, ascending by name."""

    async def get_managers(self) -> list[ManagerResult]:
        """Return people with at least one direct report, name ascending."""

    async def create_person(self, data: PersonCreate) -> PersonResult:
        """Create a person."""

    async def update_person(self, person_id: int, **updates: Any) -> PersonResult | None:
        """Apply provided fields; return None when the person does not exist."""

    async def delete_person(self, person_id: int) -> PersonResult | None:
        """Detach direct reports then delete; return the deleted person or None."""
