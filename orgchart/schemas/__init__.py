"""Pydantic request/response schemas for the API."""

from orgchart.schemas.common import CamelModel, ErrorResponse, HealthResponse
from orgchart.schemas.hierarchy import (
    HierarchyNodeResponse,
    HierarchyPathItem,
    HierarchySummaryResponse,
    SearchResultResponse,
)
from orgchart.schemas.person import (
    DepartmentCountResponse,
    ManagerResponse,
    PersonCreateRequest,
    PersonDetailResponse,
    PersonListResponse,
    PersonResponse,
    PersonUpdateRequest,
    StatisticsResponse,
)

__all__ = [
    "CamelModel",
    "DepartmentCountResponse",
    "ErrorResponse",
    "HealthResponse",
    "HierarchyNodeResponse",
    "HierarchyPathItem",
    "HierarchySummaryResponse",
    "ManagerResponse",
    "PersonCreateRequest",
    "PersonDetailResponse",
    "PersonListResponse",
    "PersonResponse",
    "PersonUpdateRequest",
    "SearchResultResponse",
    "StatisticsResponse",
]
