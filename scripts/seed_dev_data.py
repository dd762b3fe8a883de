"""Seed dev people from docs/seed-people.json into Postgres.

Each entry carries its own seed id and the seed id of its manager. Entries
are inserted in file order, so a manager must appear before its reports;
seed ids are mapped to the ids the database assigns.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-people.json]

Requires: DATABASE_URL (Postgres) and `alembic upgrade head`.
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from orgchart.application.dtos.person import PersonCreate
from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.infrastructure.persistence import database as db_mod
from orgchart.infrastructure.persistence.repositories import PersonRepository
from orgchart.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _parse_date(value: str | None) -> datetime | None:
    if not value:
        return None
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _to_create(entry: dict[str, Any], manager_id: int | None) -> PersonCreate:
    return PersonCreate(
        name=entry["name"],
        job_title=entry["jobTitle"],
        department=entry["department"],
        manager_id=manager_id,
        photo_path=entry.get("photoPath"),
        type=PersonType(entry.get("type", PersonType.EMPLOYEE.value)),
        status=PersonStatus(entry.get("status", PersonStatus.ACTIVE.value)),
        email=entry.get("email"),
        phone=entry.get("phone"),
        location=entry.get("location"),
        hire_date=_parse_date(entry.get("hireDate")),
    )


async def run(path: Path) -> int:
    """Insert every person in the seed file; return how many were created."""
    people: list[dict[str, Any]] = json.loads(path.read_text(encoding="utf-8"))
    db_mod._ensure_engine()
    if db_mod.AsyncSessionLocal is None:
        print(
            "AsyncSessionLocal not configured. Set DATABASE_URL and run: alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    id_map: dict[int, int] = {}
    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            repo = PersonRepository(session)
            for entry in people:
                seed_manager = entry.get("managerId")
                if seed_manager is not None and seed_manager not in id_map:
                    raise ValueError(
                        f"Seed person {entry['id']} references manager {seed_manager} "
                        "before it is defined"
                    )
                manager_id = id_map[seed_manager] if seed_manager is not None else None
                created = await repo.create_person(_to_create(entry, manager_id))
                id_map[entry["id"]] = created.id
                logger.info("Person %s -> %s", created.name, created.id)
    await db_mod.engine.dispose()
    return len(id_map)


def main() -> None:
    _load_env()
    setup_logging()
    path = (
        Path(sys.argv[1])
        if len(sys.argv) > 1
        else _project_root() / "docs" / "seed-people.json"
    )
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    count = asyncio.run(run(path))
    print(f"Seed completed: {count} people.")


if __name__ == "__main__":
    main()
