"""People API: thin routes delegating to PersonService and HierarchyService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from orgchart.api.v1.dependencies import (
    get_hierarchy_service,
    get_person_service,
    get_person_service_for_write,
)
from orgchart.application.dtos.person import (
    PeopleQuery,
    PersonCreate,
    PersonFilter,
    PersonSortField,
    SortOrder,
)
from orgchart.application.use_cases.hierarchy import HierarchyService
from orgchart.application.use_cases.people import PersonService
from orgchart.core.config import get_settings
from orgchart.core.limiter import limit_writes
from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.schemas.person import (
    PersonCreateRequest,
    PersonDetailResponse,
    PersonListResponse,
    PersonResponse,
    PersonUpdateRequest,
)

router = APIRouter()


@router.get("", response_model=PersonListResponse)
async def list_people(
    person_svc: Annotated[PersonService, Depends(get_person_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1, description="Page size (capped)")] = None,
    search: Annotated[str | None, Query(max_length=255)] = None,
    department: Annotated[str | None, Query(max_length=255)] = None,
    manager_id: Annotated[int | None, Query(alias="managerId", ge=1)] = None,
    type: Annotated[PersonType | None, Query()] = None,
    status: Annotated[PersonStatus | None, Query()] = None,
    sort_by: Annotated[PersonSortField, Query(alias="sortBy")] = "name",
    sort_order: Annotated[SortOrder, Query(alias="sortOrder")] = "asc",
):
    """List people, filtered and paginated."""
    settings = get_settings()
    page_size = min(limit or settings.default_page_size, settings.max_page_size)
    query = PeopleQuery(
        page=page,
        limit=page_size,
        filter=PersonFilter(
            search=(search or "").strip() or None,
            department=department,
            manager_id=manager_id,
            type=type,
            status=status,
        ),
        sort_by=sort_by,
        sort_order=sort_order,
    )
    result = await person_svc.list_people(query)
    return PersonListResponse.from_page(result)


@router.get("/{person_id}", response_model=PersonDetailResponse)
async def get_person(
    person_id: int,
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Get a person with their manager and direct reports."""
    detail = await person_svc.get_person(person_id)
    return PersonDetailResponse.from_result(detail)


@router.get("/{person_id}/management-chain", response_model=list[PersonResponse])
async def get_management_chain(
    person_id: int,
    hierarchy_svc: Annotated[HierarchyService, Depends(get_hierarchy_service)],
):
    """Managers of the person, nearest first (root last)."""
    chain = await hierarchy_svc.get_management_chain(person_id)
    return [PersonResponse.model_validate(p) for p in chain]


@router.post("", response_model=PersonResponse, status_code=201)
@limit_writes
async def create_person(
    request: Request,
    body: PersonCreateRequest,
    person_svc: Annotated[PersonService, Depends(get_person_service_for_write)],
):
    """Create a person."""
    created = await person_svc.create_person(PersonCreate(**body.model_dump()))
    return PersonResponse.model_validate(created)


@router.patch("/{person_id}", response_model=PersonResponse)
@limit_writes
async def update_person(
    request: Request,
    person_id: int,
    body: PersonUpdateRequest,
    person_svc: Annotated[PersonService, Depends(get_person_service_for_write)],
):
    """Update a person (partial). Rejects manager changes that would form a cycle."""
    updated = await person_svc.update_person(person_id, body.to_updates())
    return PersonResponse.model_validate(updated)


@router.delete("/{person_id}", status_code=204)
@limit_writes
async def delete_person(
    request: Request,
    person_id: int,
    person_svc: Annotated[PersonService, Depends(get_person_service_for_write)],
) -> None:
    """Delete a person; their direct reports become roots."""
    await person_svc.delete_person(person_id)
