"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.domain.exceptions import (
    AuthenticationException,
    CycleDetectedException,
    DirectoryException,
    HierarchyLimitExceededException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "PersonStatus",
    "PersonType",
    # Exceptions
    "AuthenticationException",
    "CycleDetectedException",
    "DirectoryException",
    "HierarchyLimitExceededException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
