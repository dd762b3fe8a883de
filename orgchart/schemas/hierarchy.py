"""Hierarchy API schemas: org-chart tree, search hits, breadcrumb, summary."""

from pydantic import Field

from orgchart.application.dtos.hierarchy import MatchedField
from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.schemas.common import CamelModel


class HierarchyNodeResponse(CamelModel):
    """One node of the org chart; children are sorted by name."""

    id: int
    name: str
    job_title: str
    department: str
    photo_path: str | None = None
    type: PersonType
    status: PersonStatus
    children: list["HierarchyNodeResponse"] = Field(default_factory=list)


class HierarchyPathItem(CamelModel):
    """Breadcrumb entry (node without its children)."""

    id: int
    name: str
    job_title: str
    department: str


class SearchResultResponse(CamelModel):
    """Hierarchy search hit, best score first."""

    id: int
    name: str
    job_title: str
    department: str
    photo_path: str | None = None
    score: int
    matched_fields: list[MatchedField]


class HierarchySummaryResponse(CamelModel):
    """Size and shape of the org chart."""

    total_people: int
    department_count: int
    levels: int
    average_team_size: int
