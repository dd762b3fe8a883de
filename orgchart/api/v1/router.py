"""API v1 router aggregation.

Health is public; every other router requires the API key when enabled.
"""

from typing import Any

from fastapi import APIRouter, Depends

from orgchart.api.v1.dependencies import require_api_key
from orgchart.api.v1.endpoints import directory, health, hierarchy, people
from orgchart.schemas.common import ErrorResponse

api_router = APIRouter()

_protected = [Depends(require_api_key)]
_error_responses: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Missing or invalid API key"},
    404: {"model": ErrorResponse, "description": "Person not found"},
    500: {"model": ErrorResponse, "description": "Corrupted hierarchy or internal error"},
    503: {"model": ErrorResponse, "description": "Database not configured"},
}

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    people.router,
    prefix="/people",
    tags=["people"],
    dependencies=_protected,
    responses={**_error_responses, 400: {"model": ErrorResponse}},
)
api_router.include_router(
    hierarchy.router,
    prefix="/hierarchy",
    tags=["hierarchy"],
    dependencies=_protected,
    responses=_error_responses,
)
api_router.include_router(
    directory.router,
    tags=["directory"],
    dependencies=_protected,
    responses=_error_responses,
)
