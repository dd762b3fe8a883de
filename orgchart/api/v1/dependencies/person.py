"""Person and hierarchy dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.application.services.chain_resolver import ChainResolver
from orgchart.application.services.tree_builder import TreeBuilder
from orgchart.application.use_cases.hierarchy import HierarchyService
from orgchart.application.use_cases.people import PersonService
from orgchart.core.config import get_settings
from orgchart.infrastructure.persistence.database import get_db, get_db_transactional
from orgchart.infrastructure.persistence.repositories import PersonRepository


async def get_person_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PersonRepository:
    """Person repository for reads (no transaction)."""
    return PersonRepository(db)


async def get_person_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> PersonRepository:
    """Person repository for create/update/delete (commit on success)."""
    return PersonRepository(db)


async def get_person_service(
    person_repo: Annotated[PersonRepository, Depends(get_person_repo)],
) -> PersonService:
    """Person service for list/get/statistics."""
    return PersonService(person_repo)


async def get_person_service_for_write(
    person_repo: Annotated[PersonRepository, Depends(get_person_repo_for_write)],
) -> PersonService:
    """Person service for writes (same transaction for validation and update)."""
    return PersonService(person_repo)


async def get_hierarchy_service(
    person_repo: Annotated[PersonRepository, Depends(get_person_repo)],
) -> HierarchyService:
    """Hierarchy service with traversal caps from settings."""
    settings = get_settings()
    return HierarchyService(
        person_repo,
        tree_builder=TreeBuilder(
            person_repo,
            max_depth=settings.hierarchy_max_depth,
            max_nodes=settings.hierarchy_max_nodes,
        ),
        chain_resolver=ChainResolver(person_repo),
    )
