"""Use cases: people directory and org-chart hierarchy."""

from orgchart.application.use_cases.hierarchy import HierarchyService
from orgchart.application.use_cases.people import PersonService

__all__ = [
    "HierarchyService",
    "PersonService",
]
