"""Domain enumerations for the directory.

Enums represent fixed sets of domain values (person type and status).
Values match the stored and wire representation exactly.
"""

from enum import Enum


class PersonType(str, Enum):
    """Kind of person in the organization."""

    EMPLOYEE = "Employee"
    PARTNER = "Partner"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid type values as strings."""
        return [t.value for t in cls]


class PersonStatus(str, Enum):
    """Current status of a person.

    Inactive people stay in the hierarchy; status is informational.
    """

    ACTIVE = "Active"
    INACTIVE = "Inactive"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [s.value for s in cls]
