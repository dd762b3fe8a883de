"""Person operations: list, get, create, update, delete, directory statistics."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from typing import Any

from orgchart.application.dtos.person import (
    DirectoryStatistics,
    ManagerResult,
    Page,
    PeopleQuery,
    PersonCreate,
    PersonDetailResult,
    PersonFilter,
    PersonResult,
)
from orgchart.application.interfaces.repositories import IPersonRepository
from orgchart.application.interfaces.services import PersonEventListener
from orgchart.application.services.chain_resolver import ChainResolver
from orgchart.application.services.tree_builder import sibling_key
from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "job_title",
        "department",
        "manager_id",
        "photo_path",
        "type",
        "status",
        "email",
        "phone",
        "location",
        "hire_date",
    }
)


class PersonService:
    """Create, query and maintain people. Rejects manager assignments that would form a cycle."""

    def __init__(
        self,
        person_repo: IPersonRepository,
        chain_resolver: ChainResolver | None = None,
        listeners: Sequence[PersonEventListener] = (),
    ) -> None:
        self.person_repo = person_repo
        self.chain_resolver = chain_resolver or ChainResolver(person_repo)
        self.listeners = list(listeners)

    async def list_people(self, query: PeopleQuery) -> Page[PersonResult]:
        """Return one page of people matching the query filter."""
        items, total = await self.person_repo.list_people(query)
        return Page(items=items, page=query.page, limit=query.limit, total=total)

    async def get_person(self, person_id: int) -> PersonDetailResult:
        """Return person with manager and direct reports; raise if not found."""
        person = await self.person_repo.get_by_id(person_id)
        if person is None:
            raise ResourceNotFoundException("Person", person_id)
        manager = None
        if person.manager_id is not None:
            manager = await self.person_repo.get_by_id(person.manager_id)
        reports = await self.person_repo.find_direct_reports(person_id)
        return PersonDetailResult(
            person=person,
            manager=manager,
            direct_reports=sorted(reports, key=sibling_key),
        )

    async def get_departments(self) -> list[str]:
        return await self.person_repo.get_departments()

    async def get_managers(self) -> list[ManagerResult]:
        return await self.person_repo.get_managers()

    async def get_statistics(self) -> DirectoryStatistics:
        """Return head counts by type, status and department."""
        repo = self.person_repo
        return DirectoryStatistics(
            total_people=await repo.count(),
            total_employees=await repo.count(PersonFilter(type=PersonType.EMPLOYEE)),
            total_partners=await repo.count(PersonFilter(type=PersonType.PARTNER)),
            total_active=await repo.count(PersonFilter(status=PersonStatus.ACTIVE)),
            total_inactive=await repo.count(PersonFilter(status=PersonStatus.INACTIVE)),
            departments=await repo.get_department_counts(),
        )

    async def create_person(self, data: PersonCreate) -> PersonResult:
        """Create a person; the manager, when given, must exist."""
        if data.manager_id is not None and not await self.person_repo.exists(
            data.manager_id
        ):
            raise ResourceNotFoundException("Manager", data.manager_id)
        person = await self.person_repo.create_person(data)
        logger.info("Person created: id=%s name=%s", person.id, person.name)
        await self._publish("person.created", {"person": _payload(person)})
        return person

    async def update_person(self, person_id: int, updates: dict[str, Any]) -> PersonResult:
        """Apply the provided fields (None clears optional fields).

        Raises:
            ResourceNotFoundException: Person or new manager does not exist.
            ValidationException: Unknown field, self-management, or the new
                manager is below this person (circular reference).
        """
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationException(
                f"Unknown fields: {', '.join(sorted(unknown))}", field=sorted(unknown)[0]
            )
        current = await self.person_repo.get_by_id(person_id)
        if current is None:
            raise ResourceNotFoundException("Person", person_id)

        new_manager_id = updates.get("manager_id")
        if new_manager_id is not None:
            await self.validate_manager_assignment(person_id, new_manager_id)

        updated = await self.person_repo.update_person(person_id, **updates)
        if updated is None:
            raise ResourceNotFoundException("Person", person_id)
        logger.info("Person updated: id=%s", person_id)

        await self._publish(
            "person.updated",
            {"before": _payload(current), "after": _payload(updated)},
        )
        if "manager_id" in updates and updates["manager_id"] != current.manager_id:
            await self._publish(
                "person.manager_changed",
                {
                    "person_id": person_id,
                    "old_manager_id": current.manager_id,
                    "new_manager_id": updates["manager_id"],
                },
            )
        if "status" in updates and updates["status"] != current.status:
            await self._publish(
                "person.status_changed",
                {
                    "person_id": person_id,
                    "old_status": current.status,
                    "new_status": updates["status"],
                },
            )
        return updated

    async def validate_manager_assignment(self, person_id: int, manager_id: int) -> None:
        """Raise unless manager_id can become the manager of person_id."""
        if manager_id == person_id:
            raise ValidationException(
                "A person cannot be their own manager", field="manager_id"
            )
        if not await self.person_repo.exists(manager_id):
            raise ResourceNotFoundException("Manager", manager_id)
        if await self.chain_resolver.would_create_cycle(person_id, manager_id):
            raise ValidationException(
                "This manager assignment would create a circular reference",
                field="manager_id",
            )

    async def delete_person(self, person_id: int) -> None:
        """Delete a person; their direct reports are left without a manager."""
        deleted = await self.person_repo.delete_person(person_id)
        if deleted is None:
            raise ResourceNotFoundException("Person", person_id)
        logger.info("Person deleted: id=%s name=%s", deleted.id, deleted.name)
        await self._publish("person.deleted", {"person": _payload(deleted)})

    async def _publish(self, event_name: str, payload: dict[str, Any]) -> None:
        for listener in self.listeners:
            await listener(event_name, payload)


def _payload(person: PersonResult) -> dict[str, Any]:
    return dataclasses.asdict(person)
