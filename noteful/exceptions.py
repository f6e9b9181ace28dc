"""
Noteful API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the request pipeline.
How:   Each exception carries a client-safe message, an optional context dict
       (logged, never returned) and the HTTP status it maps to. Pipeline
       stages raise them; `Pipeline.run` turns them into structured
       short-circuit responses. Anything outside this hierarchy (store
       failures) propagates to the catch-all handler in main.py.

Exception Hierarchy:
    NotefulError (base)
    ├── AuthenticationError  → 401 {"error": "Unauthorized request"}
    ├── ValidationError      → 400 {"error": {"message": ...}}
    └── NotFoundError        → 404 {"error": {"message": ...}}
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the error maps to
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        """JSON body sent to the client for this error."""
        return {"error": {"message": self.message}}


class AuthenticationError(NotefulError):
    """
    Raised when the bearer token is absent, malformed or wrong.

    HTTP:  401 Unauthorized. The body is a flat string, unlike the other
           errors, and never says which of the three checks failed.
    """

    status_code = 401

    def __init__(
        self,
        reason: str = "invalid_token",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["reason"] = reason
        super().__init__(message="Unauthorized request", context=ctx)
        self.reason = reason

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(NotefulError):
    """
    Raised when client input fails validation.

    When:  Missing or null required field, wrongly typed field, unparseable body.
    HTTP:  400 Bad Request

    Example response:
        {"error": {"message": "Missing foldername in request body"}}
    """

    status_code = 400

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


class NotFoundError(NotefulError):
    """
    Raised when a requested resource (or any resource at all) does not exist.

    When:  GET /api/folders with an empty table, GET/DELETE on an unknown id.
    HTTP:  404 Not Found

    The store returns None for missing rows; the existence-check stage
    converts that into this exception with a resource-specific message.
    """

    status_code = 404

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
