"""DTOs for the org-chart hierarchy and hierarchy search (no dependency on ORM)."""

from dataclasses import dataclass, field
from typing import Literal

from orgchart.application.dtos.person import PersonResult
from orgchart.domain.enums import PersonStatus, PersonType

MatchedField = Literal["name", "jobTitle", "department"]


@dataclass
class HierarchyNode:
    """One person in a materialized org-chart tree.

    Built fresh per request by TreeBuilder; children are ordered by name
    ascending. Not persisted and not mutated after the builder returns.
    """

    id: int
    name: str
    job_title: str
    department: str
    photo_path: str | None
    type: PersonType
    status: PersonStatus
    children: list["HierarchyNode"] = field(default_factory=list)

    @classmethod
    def from_person(cls, person: PersonResult) -> "HierarchyNode":
        return cls(
            id=person.id,
            name=person.name,
            job_title=person.job_title,
            department=person.department,
            photo_path=person.photo_path,
            type=person.type,
            status=person.status,
        )


@dataclass(frozen=True)
class SearchResult:
    """Single hierarchy search hit. matched_fields keeps the order name, jobTitle, department."""

    id: int
    name: str
    job_title: str
    department: str
    photo_path: str | None
    score: int
    matched_fields: tuple[MatchedField, ...]


@dataclass(frozen=True)
class HierarchySummary:
    """Size and shape of a hierarchy tree."""

    total_people: int
    department_count: int
    levels: int
    average_team_size: int
