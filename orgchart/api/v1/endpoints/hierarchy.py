"""Hierarchy API: org chart, in-tree search, summary and breadcrumb."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from orgchart.api.v1.dependencies import get_hierarchy_service
from orgchart.application.use_cases.hierarchy import HierarchyService
from orgchart.schemas.hierarchy import (
    HierarchyNodeResponse,
    HierarchyPathItem,
    HierarchySummaryResponse,
    SearchResultResponse,
)

router = APIRouter()

RootId = Annotated[
    int | None,
    Query(alias="rootId", ge=1, description="Root person (default: first person without a manager)"),
]


@router.get("", response_model=HierarchyNodeResponse)
async def get_hierarchy(
    hierarchy_svc: Annotated[HierarchyService, Depends(get_hierarchy_service)],
    root_id: RootId = None,
):
    """Org chart rooted at rootId, children sorted by name."""
    tree = await hierarchy_svc.get_hierarchy(root_id)
    return HierarchyNodeResponse.model_validate(tree)


@router.get("/search", response_model=list[SearchResultResponse])
async def search_hierarchy(
    hierarchy_svc: Annotated[HierarchyService, Depends(get_hierarchy_service)],
    q: Annotated[str, Query(max_length=255, description="Search text")] = "",
    root_id: RootId = None,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
):
    """People in the org chart matching q, best match first."""
    results = await hierarchy_svc.search(q, root_id=root_id, limit=limit)
    return [SearchResultResponse.model_validate(r) for r in results]


@router.get("/summary", response_model=HierarchySummaryResponse)
async def get_hierarchy_summary(
    hierarchy_svc: Annotated[HierarchyService, Depends(get_hierarchy_service)],
    root_id: RootId = None,
):
    """Head count, departments, levels and average team size of the org chart."""
    summary = await hierarchy_svc.get_summary(root_id)
    return HierarchySummaryResponse.model_validate(summary)


@router.get("/path/{person_id}", response_model=list[HierarchyPathItem])
async def get_hierarchy_path(
    person_id: int,
    hierarchy_svc: Annotated[HierarchyService, Depends(get_hierarchy_service)],
    root_id: RootId = None,
):
    """Breadcrumb from the root down to person_id."""
    path = await hierarchy_svc.get_path(person_id, root_id)
    return [HierarchyPathItem.model_validate(node) for node in path]
