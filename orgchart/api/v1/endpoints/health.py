"""Health check endpoints. No API key; used for liveness and readiness probes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from orgchart.domain.exceptions import SqlNotConfiguredException
from orgchart.infrastructure.persistence import database
from orgchart.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse, response_model_exclude_none=True)
def health_check() -> HealthResponse:
    """Liveness: the process is serving requests."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    responses={503: {"description": "Database not reachable", "model": HealthResponse}},
)
async def readiness_check() -> HealthResponse | JSONResponse:
    """Return 200 when the database answers SELECT 1; 503 otherwise."""
    try:
        await database.check_connection()
    except SqlNotConfiguredException as exc:
        message = exc.message
    except SQLAlchemyError as exc:
        logger.warning("Readiness check failed: %s", exc)
        message = "Database not reachable"
    else:
        return HealthResponse()
    return JSONResponse(
        status_code=503,
        content=HealthResponse(status="not_ready", message=message).model_dump(),
    )
