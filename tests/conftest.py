"""Pytest configuration and fixtures for orgchart.

HTTP tests run against orgchart.main:app with the person repository
replaced by an in-memory store, so they need no database. Repository
tests use db_session and are marked requires_db.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.api.v1.dependencies import get_person_repo, get_person_repo_for_write
from orgchart.application.dtos.person import (
    DepartmentCount,
    ManagerResult,
    PeopleQuery,
    PersonCreate,
    PersonFilter,
    PersonResult,
)
from orgchart.core.config import get_settings
from orgchart.core.limiter import limiter
from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.infrastructure.persistence import database
from orgchart.main import app

_FIXED_TIME = datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)


def make_person(
    person_id: int,
    name: str,
    manager_id: int | None = None,
    job_title: str = "Engineer",
    department: str = "Engineering",
    **overrides: Any,
) -> PersonResult:
    """PersonResult with sensible defaults for tests."""
    values: dict[str, Any] = {
        "id": person_id,
        "name": name,
        "job_title": job_title,
        "department": department,
        "manager_id": manager_id,
        "photo_path": None,
        "type": PersonType.EMPLOYEE,
        "status": PersonStatus.ACTIVE,
        "email": None,
        "phone": None,
        "location": None,
        "hire_date": None,
        "created_at": _FIXED_TIME,
        "updated_at": _FIXED_TIME,
    }
    values.update(overrides)
    return PersonResult(**values)


class InMemoryPersonRepository:
    """Dict-backed IPersonRepository. Records every call in .calls."""

    def __init__(self, people: list[PersonResult] | None = None) -> None:
        self.people: dict[int, PersonResult] = {p.id: p for p in people or []}
        self.calls: list[tuple[str, Any]] = []

    def _next_id(self) -> int:
        return max(self.people, default=0) + 1

    async def get_by_id(self, person_id: int) -> PersonResult | None:
        self.calls.append(("get_by_id", person_id))
        return self.people.get(person_id)

    async def find_direct_reports(self, manager_id: int) -> list[PersonResult]:
        self.calls.append(("find_direct_reports", manager_id))
        return [p for p in self.people.values() if p.manager_id == manager_id]

    async def find_root_person(self) -> PersonResult | None:
        self.calls.append(("find_root_person", None))
        roots = sorted(
            (p for p in self.people.values() if p.manager_id is None),
            key=lambda p: p.id,
        )
        return roots[0] if roots else None

    async def exists(self, person_id: int) -> bool:
        self.calls.append(("exists", person_id))
        return person_id in self.people

    def _matching(self, filter: PersonFilter | None) -> list[PersonResult]:
        people = list(self.people.values())
        if filter is None:
            return people
        if filter.search:
            needle = filter.search.lower()
            people = [
                p
                for p in people
                if needle in p.name.lower()
                or needle in p.job_title.lower()
                or needle in (p.email or "").lower()
            ]
        if filter.department:
            people = [p for p in people if p.department == filter.department]
        if filter.manager_id is not None:
            people = [p for p in people if p.manager_id == filter.manager_id]
        if filter.type is not None:
            people = [p for p in people if p.type == filter.type]
        if filter.status is not None:
            people = [p for p in people if p.status == filter.status]
        return people

    async def list_people(self, query: PeopleQuery) -> tuple[list[PersonResult], int]:
        self.calls.append(("list_people", query))
        matching = sorted(self._matching(query.filter), key=lambda p: p.id)
        matching.sort(
            key=lambda p: getattr(p, query.sort_by),
            reverse=query.sort_order == "desc",
        )
        page = matching[query.offset : query.offset + query.limit]
        return page, len(matching)

    async def count(self, filter: PersonFilter | None = None) -> int:
        self.calls.append(("count", filter))
        return len(self._matching(filter))

    async def get_departments(self) -> list[str]:
        self.calls.append(("get_departments", None))
        return sorted({p.department for p in self.people.values()})

    async def get_department_counts(self) -> list[DepartmentCount]:
        self.calls.append(("get_department_counts", None))
        counts: dict[str, int] = {}
        for p in self.people.values():
            counts[p.department] = counts.get(p.department, 0) + 1
        return [DepartmentCount(name=n, count=c) for n, c in sorted(counts.items())]

    async def get_managers(self) -> list[ManagerResult]:
        self.calls.append(("get_managers", None))
        counts: dict[int, int] = {}
        for p in self.people.values():
            if p.manager_id is not None:
                counts[p.manager_id] = counts.get(p.manager_id, 0) + 1
        managers = sorted(
            (self.people[m] for m in counts if m in self.people),
            key=lambda p: (p.name, p.id),
        )
        return [ManagerResult(person=m, direct_reports_count=counts[m.id]) for m in managers]

    async def create_person(self, data: PersonCreate) -> PersonResult:
        self.calls.append(("create_person", data))
        person = PersonResult(
            id=self._next_id(),
            created_at=_FIXED_TIME,
            updated_at=_FIXED_TIME,
            **dataclasses.asdict(data),
        )
        self.people[person.id] = person
        return person

    async def update_person(self, person_id: int, **updates: Any) -> PersonResult | None:
        self.calls.append(("update_person", person_id))
        current = self.people.get(person_id)
        if current is None:
            return None
        updated = dataclasses.replace(current, **updates)
        self.people[person_id] = updated
        return updated

    async def delete_person(self, person_id: int) -> PersonResult | None:
        self.calls.append(("delete_person", person_id))
        deleted = self.people.pop(person_id, None)
        if deleted is None:
            return None
        for p in list(self.people.values()):
            if p.manager_id == person_id:
                self.people[p.id] = dataclasses.replace(p, manager_id=None)
        return deleted


def sample_org() -> list[PersonResult]:
    """Small org used across tests.

    Alex Johnson (CEO)
      Marcus Williams (Sales)
        Liam O'Brien
      Sarah Chen (VP of Engineering)
        David Kim
          Emily Davis
        João Silva
    """
    return [
        make_person(1, "Alex Johnson", None, "Chief Executive Officer", "Executive"),
        make_person(2, "Sarah Chen", 1, "VP of Engineering", "Engineering"),
        make_person(3, "Marcus Williams", 1, "VP of Sales", "Sales"),
        make_person(4, "David Kim", 2, "Engineering Manager", "Engineering"),
        make_person(5, "João Silva", 2, "Staff Engineer", "Engineering"),
        make_person(6, "Emily Davis", 4, "Software Engineer", "Engineering"),
        make_person(7, "Liam O'Brien", 3, "Account Executive", "Sales"),
    ]


@pytest.fixture
def person_factory() -> Callable[..., PersonResult]:
    return make_person


@pytest.fixture
def org_repo() -> InMemoryPersonRepository:
    """In-memory store loaded with sample_org()."""
    return InMemoryPersonRepository(sample_org())


@pytest.fixture
def repo_factory() -> Callable[[list[PersonResult]], InMemoryPersonRepository]:
    return InMemoryPersonRepository


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings around each test so env overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client(org_repo: InMemoryPersonRepository) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by org_repo."""
    app.dependency_overrides[get_person_repo] = lambda: org_repo
    app.dependency_overrides[get_person_repo_for_write] = lambda: org_repo
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after test.

    Skips when DATABASE_URL is not configured. Run without a database via:
    pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
