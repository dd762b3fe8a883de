"""Shared schema base and error body."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API schemas: camelCase on the wire, snake_case in Python.

    Requests accept either spelling (populate_by_name); responses are
    serialized by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """JSON body of every error response."""

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable description")
    details: dict[str, Any] | list[Any] | None = None


class HealthResponse(BaseModel):
    """Body of GET /health and GET /health/ready (message only when not ready)."""

    status: str = "ok"
    message: str | None = None
