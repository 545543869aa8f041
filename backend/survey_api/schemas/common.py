"""
Survey API Backend: Shared Response Schemas
=============================================

What:  Pydantic models shared by every route: error envelope and health report.
Why:   Clients need one consistent structure to parse errors programmatically.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentModel(BaseModel):
    """
    Base for documents exposed with client-facing (camelCase / `_id`) keys.

    Why populate_by_name:
        Services build models with Python field names; FastAPI re-validates
        the aliased dump against the response model, so both spellings must
        be accepted.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after an update."""
    message: str = Field(description="Human-readable success message")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "message": "Survey not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
