"""Presentation-layer dependency injection (composition root).

Routes depend only on these; repositories and services are built here.
"""

from orgchart.api.v1.dependencies.auth import require_api_key
from orgchart.api.v1.dependencies.person import (
    get_hierarchy_service,
    get_person_repo,
    get_person_repo_for_write,
    get_person_service,
    get_person_service_for_write,
)

__all__ = [
    "get_hierarchy_service",
    "get_person_repo",
    "get_person_repo_for_write",
    "get_person_service",
    "get_person_service_for_write",
    "require_api_key",
]
