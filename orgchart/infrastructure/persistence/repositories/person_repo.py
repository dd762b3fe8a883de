"""Person repository. Returns application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from orgchart.application.dtos.person import (
    DepartmentCount,
    ManagerResult,
    PeopleQuery,
    PersonCreate,
    PersonFilter,
    PersonResult,
)
from orgchart.infrastructure.persistence.models.person import Person
from orgchart.infrastructure.persistence.repositories.base import BaseRepository

_SORT_COLUMNS = {
    "name": Person.name,
    "job_title": Person.job_title,
    "department": Person.department,
    "created_at": Person.created_at,
    "updated_at": Person.updated_at,
}


def _to_result(p: Person) -> PersonResult:
    """Map ORM Person to PersonResult."""
    return PersonResult(
        id=p.id,
        name=p.name,
        job_title=p.job_title,
        department=p.department,
        manager_id=p.manager_id,
        photo_path=p.photo_path,
        type=p.type,
        status=p.status,
        email=p.email,
        phone=p.phone,
        location=p.location,
        hire_date=p.hire_date,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


def _filter_clauses(filter: PersonFilter | None) -> list[Any]:
    if filter is None:
        return []
    clauses: list[Any] = []
    if filter.search:
        # % and _ in the search text are literal
        clauses.append(
            or_(
                Person.name.icontains(filter.search, autoescape=True),
                Person.job_title.icontains(filter.search, autoescape=True),
                Person.email.icontains(filter.search, autoescape=True),
            )
        )
    if filter.department:
        clauses.append(Person.department == filter.department)
    if filter.manager_id is not None:
        clauses.append(Person.manager_id == filter.manager_id)
    if filter.type is not None:
        clauses.append(Person.type == filter.type)
    if filter.status is not None:
        clauses.append(Person.status == filter.status)
    return clauses


class PersonRepository(BaseRepository[Person]):
    """Person store over SQLAlchemy. Implements IPersonRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Person)

    async def get_by_id(self, person_id: int) -> PersonResult | None:
        row = await super().get_by_id(person_id)
        return _to_result(row) if row else None

    async def exists(self, person_id: int) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(Person).where(Person.id == person_id)
        )
        return result.scalar_one() > 0

    async def find_direct_reports(self, manager_id: int) -> list[PersonResult]:
        result = await self.db.execute(
            select(Person)
            .where(Person.manager_id == manager_id)
            .order_by(Person.name.asc(), Person.id.asc())
        )
        return [_to_result(p) for p in result.scalars().all()]

    async def find_root_person(self) -> PersonResult | None:
        result = await self.db.execute(
            select(Person)
            .where(Person.manager_id.is_(None))
            .order_by(Person.id.asc())
            .limit(1)
        )
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def list_people(self, query: PeopleQuery) -> tuple[list[PersonResult], int]:
        clauses = _filter_clauses(query.filter)
        column = _SORT_COLUMNS[query.sort_by]
        order = column.desc() if query.sort_order == "desc" else column.asc()
        result = await self.db.execute(
            select(Person)
            .where(*clauses)
            .order_by(order, Person.id.asc())
            .offset(query.offset)
            .limit(query.limit)
        )
        items = [_to_result(p) for p in result.scalars().all()]
        return items, await self.count(query.filter)

    async def count(self, filter: PersonFilter | None = None) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Person).where(*_filter_clauses(filter))
        )
        return result.scalar_one()

    async def get_departments(self) -> list[str]:
        result = await self.db.execute(
            select(Person.department).distinct().order_by(Person.department.asc())
        )
        return list(result.scalars().all())

    async def get_department_counts(self) -> list[DepartmentCount]:
        result = await self.db.execute(
            select(Person.department, func.count(Person.id))
            .group_by(Person.department)
            .order_by(Person.department.asc())
        )
        return [DepartmentCount(name=name, count=count) for name, count in result.all()]

    async def get_managers(self) -> list[ManagerResult]:
        report = aliased(Person)
        reports_count = (
            select(report.manager_id, func.count(report.id).label("reports"))
            .where(report.manager_id.is_not(None))
            .group_by(report.manager_id)
            .subquery()
        )
        result = await self.db.execute(
            select(Person, reports_count.c.reports)
            .join(reports_count, reports_count.c.manager_id == Person.id)
            .order_by(Person.name.asc(), Person.id.asc())
        )
        return [
            ManagerResult(person=_to_result(p), direct_reports_count=count)
            for p, count in result.all()
        ]

    async def create_person(self, data: PersonCreate) -> PersonResult:
        entity = Person(
            name=data.name,
            job_title=data.job_title,
            department=data.department,
            manager_id=data.manager_id,
            photo_path=data.photo_path,
            type=data.type,
            status=data.status,
            email=data.email,
            phone=data.phone,
            location=data.location,
            hire_date=data.hire_date,
        )
        created = await self.create(entity)
        return _to_result(created)

    async def update_person(self, person_id: int, **updates: Any) -> PersonResult | None:
        """Update person; only provided keys are applied (None clears optional fields)."""
        entity = await super().get_by_id(person_id)
        if not entity:
            return None
        for key, value in updates.items():
            setattr(entity, key, value)
        updated = await self.update(entity)
        return _to_result(updated)

    async def delete_person(self, person_id: int) -> PersonResult | None:
        entity = await super().get_by_id(person_id)
        if not entity:
            return None
        await self.db.execute(
            update(Person).where(Person.manager_id == person_id).values(manager_id=None)
        )
        deleted = _to_result(entity)
        await self.delete(entity)
        return deleted
