"""Directory-wide lookups: departments, managers, statistics."""

from typing import Annotated

from fastapi import APIRouter, Depends

from orgchart.api.v1.dependencies import get_person_service
from orgchart.application.use_cases.people import PersonService
from orgchart.schemas.person import ManagerResponse, StatisticsResponse

router = APIRouter()


@router.get("/departments", response_model=list[str])
async def list_departments(
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Distinct department names, sorted."""
    return await person_svc.get_departments()


@router.get("/managers", response_model=list[ManagerResponse])
async def list_managers(
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """People with at least one direct report."""
    managers = await person_svc.get_managers()
    return [ManagerResponse.from_result(m) for m in managers]


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Head counts by type, status and department."""
    stats = await person_svc.get_statistics()
    return StatisticsResponse.from_result(stats)
