"""Application DTOs: read-models and inputs passed between layers (no ORM)."""

from orgchart.application.dtos.hierarchy import (
    HierarchyNode,
    HierarchySummary,
    SearchResult,
)
from orgchart.application.dtos.person import (
    DepartmentCount,
    DirectoryStatistics,
    ManagerResult,
    Page,
    PeopleQuery,
    PersonCreate,
    PersonDetailResult,
    PersonFilter,
    PersonResult,
)

__all__ = [
    "DepartmentCount",
    "DirectoryStatistics",
    "HierarchyNode",
    "HierarchySummary",
    "ManagerResult",
    "Page",
    "PeopleQuery",
    "PersonCreate",
    "PersonDetailResult",
    "PersonFilter",
    "PersonResult",
    "SearchResult",
]
