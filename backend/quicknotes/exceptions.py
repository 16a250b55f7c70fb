"""
QuickNotes Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the error scenarios of the notes API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the note store and route handlers; caught by global handlers.

Exception Hierarchy:
    QuickNotesError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

The `message` of each exception is what the client sees in the `error` field;
`context` is logged server-side only.
"""

from typing import Any, Dict, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickNotesError):
    """
    Raised when client input fails validation.

    When:    Non-integer note id on delete, blank title or content on create.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Invalid ID", "code": "validation_error", "request_id": "1a2b3c4d"}
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


class NotFoundError(QuickNotesError):
    """
    Raised when a requested resource does not exist.

    When:    DELETE /api/notes/{id} where no note has that id.
    HTTP:    404 Not Found

    The store reports absence as an outcome value, not an exception; the
    route converts that outcome into this error.
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


class DatabaseError(QuickNotesError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. SQL text,
        constraint names and driver errors go to the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
