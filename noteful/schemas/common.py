"""
Noteful API — Error & Health Schemas
=====================================

What:  Response shapes shared across routes. Used for OpenAPI documentation;
       the pipeline builds the matching dicts directly.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Largest id a 4-byte INTEGER column can hold; larger values cannot exist.
MAX_RECORD_ID = 2_147_483_647


class ErrorMessage(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    What:  Envelope for 400 / 404 / 500 responses.

    Example:
        {"error": {"message": "Folder does not exist"}}
    """
    error: ErrorMessage
    request_id: Optional[str] = Field(
        default=None,
        description="Correlation ID, present on 500 responses",
    )


class UnauthorizedResponse(BaseModel):
    """
    What:  Body of every 401 produced by the bearer-token gate.

    Example:
        {"error": "Unauthorized request"}
    """
    error: str = Field(default="Unauthorized request")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health (public, not behind the bearer gate).
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
