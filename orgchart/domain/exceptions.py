"""Domain exceptions for the directory.

Defines domain-level exceptions that represent business rule violations
and broken data invariants. These exceptions are independent of
infrastructure concerns. Presentation layer maps them to HTTP responses
in exception handlers.
"""

from typing import Any


class DirectoryException(Exception):
    """Base exception for all directory application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DirectoryException):
    """Raised when input validation fails (e.g. invalid manager assignment)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(DirectoryException):
    """Raised when authentication fails (missing or invalid API key)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(DirectoryException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: int | str | None = None) -> None:
        """Initialize with resource type and optional id.

        Args:
            resource_type: Type of resource (e.g. 'Person', 'Manager', 'Root person').
            resource_id: The identifier that was not found, when there is one.
        """
        if resource_id is None:
            message = f"{resource_type} not found"
        else:
            message = f"{resource_type} not found: {resource_id}"
        super().__init__(
            message,
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class CycleDetectedException(DirectoryException):
    """Raised when the manager graph contains a cycle (not a forest).

    path lists the person ids walked before the repeated id was reached,
    followed by the repeated id itself.
    """

    def __init__(self, person_id: int, path: list[int]) -> None:
        """Initialize with the starting person and the walked path.

        Args:
            person_id: Person where the walk (chain or tree) started.
            path: Ids in walk order, ending with the id seen twice.
        """
        super().__init__(
            f"Management cycle detected starting from person {person_id}",
            "CYCLE_DETECTED",
            {"person_id": person_id, "path": path},
        )


class HierarchyLimitExceededException(DirectoryException):
    """Raised when a hierarchy exceeds the configured depth or node cap."""

    def __init__(self, limit_name: str, limit: int, root_id: int) -> None:
        """Initialize with which limit was hit.

        Args:
            limit_name: 'max_depth' or 'max_nodes'.
            limit: Configured value of that limit.
            root_id: Root of the tree being built.
        """
        super().__init__(
            f"Hierarchy rooted at {root_id} exceeds {limit_name}={limit}",
            "HIERARCHY_LIMIT_EXCEEDED",
            {"limit_name": limit_name, "limit": limit, "root_id": root_id},
        )


class SqlNotConfiguredException(DirectoryException):
    """Raised when an operation requires the database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
