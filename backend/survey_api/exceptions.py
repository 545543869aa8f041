"""
Survey API Backend: Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages. They replace generic Python
       exceptions that would leak internal details to the client.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    SurveyAppError (base)
    ├── ValidationError     → 400 Bad Request (missing field, malformed id, duplicate email)
    ├── UnauthorizedError   → 401 Unauthorized (unknown email or wrong password)
    ├── NotFoundError       → 404 Not Found
    └── DatabaseError       → 500 Internal Server Error (generic message only)

Anything that is not a SurveyAppError collapses into a generic 500 in the
catch-all handler. Nothing is retried.
"""

from typing import Any, Dict, Optional


class SurveyAppError(Exception):
    """
    Base exception for all Survey API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler says so)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SurveyAppError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, malformed identifiers, duplicate email.
    HTTP:    400 Bad Request

    Schema-level problems (a survey body that is not a JSON object) surface as
    FastAPI's RequestValidationError and get the same 400 envelope; this
    exception covers the rules the services check themselves.

    Example response:
        {
            "error": "validation_error",
            "message": "All fields (name, email, password) are required.",
            "details": {"fields": ["name", "email", "password"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(SurveyAppError):
    """
    Raised when login credentials do not match a stored user.

    HTTP:    401 Unauthorized

    The message never says which half of the credential pair was wrong,
    except for the provider route, which keeps its "Provider not found." text.
    """

    def __init__(
        self,
        message: str = "Invalid credentials.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(SurveyAppError):
    """
    Raised when a requested document does not exist.

    When:    GET /api/surveys/{id} with an id that was never issued.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing rows; services convert None into
    this exception so the status code comes from the global handler.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(SurveyAppError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        Detailed error info is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
