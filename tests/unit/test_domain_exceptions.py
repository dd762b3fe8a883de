"""Tests for domain exceptions (error_code, message, details)."""

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


def test_directory_exception_default_error_code() -> None:
    """Base DirectoryException uses class name as error_code when not provided."""
    exc = DirectoryException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "DirectoryException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = DirectoryException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    exc = ValidationException("Invalid manager", field="manager_id")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "manager_id"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Invalid").details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_resource_not_found_with_id() -> None:
    exc = ResourceNotFoundException("Person", 42)
    assert exc.message == "Person not found: 42"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "Person", "resource_id": 42}


def test_resource_not_found_without_id() -> None:
    assert ResourceNotFoundException("Root person").message == "Root person not found"


def test_cycle_detected() -> None:
    exc = CycleDetectedException(1, [1, 2, 1])
    assert exc.error_code == "CYCLE_DETECTED"
    assert exc.details == {"person_id": 1, "path": [1, 2, 1]}


def test_hierarchy_limit() -> None:
    exc = HierarchyLimitExceededException("max_depth", 64, 1)
    assert exc.error_code == "HIERARCHY_LIMIT_EXCEEDED"
    assert "max_depth=64" in exc.message


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_enum_values() -> None:
    assert PersonType.values() == ["Employee", "Partner"]
    assert PersonStatus.values() == ["Active", "Inactive"]
