"""
Pastoral Admin Backend — Shared Request/Response Schemas
==========================================================

What:  Response envelopes shared by every router, plus the edge conversion
       for optional text fields.
Who:   Imported by the entity schema modules and the route handlers.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


def blank_to_none(value: Any) -> Any:
    """
    Treat an empty string as "absent" for optional text fields.

    Clients send "" for a field they left empty; the domain only ever sees
    None for that case, so the conversion happens once, while decoding.
    """
    if isinstance(value, str) and value == "":
        return None
    return value


class MessageResponse(BaseModel):
    """
    What:  Body of update and delete responses, which return no entity.
    """
    message: str = Field(description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "not_found", "already_exists")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which resource conflicted)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "already_exists",
            "message": "A industry with key 'industry.technology' already exists",
            "details": {"resource": "industry", "key": "industry.technology"},
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for container and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
