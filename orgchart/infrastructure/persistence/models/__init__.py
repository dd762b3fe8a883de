"""Persistence models: ORM entities and mixins."""

from orgchart.infrastructure.persistence.models.mixins import TimestampMixin
from orgchart.infrastructure.persistence.models.person import Person

__all__ = [
    "Person",
    "TimestampMixin",
]
