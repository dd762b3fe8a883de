"""SQLAlchemy repositories implementing application repository ports."""

from orgchart.infrastructure.persistence.repositories.base import BaseRepository
from orgchart.infrastructure.persistence.repositories.person_repo import PersonRepository

__all__ = [
    "BaseRepository",
    "PersonRepository",
]
