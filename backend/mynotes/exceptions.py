"""
MyNotes Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error scenarios the API exposes.
Why:   Each exception maps to one HTTP status code in the global handlers
       registered by main.py, so routes and services never build error
       responses themselves.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by routes and services; caught by global handlers.

Exception Hierarchy:
    MyNotesError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

    Malformed path ids never reach this hierarchy: FastAPI raises
    RequestValidationError while binding the request, and main.py maps
    that to 400 as well.
"""

from typing import Any, Dict, Optional


class MyNotesError(Exception):
    """
    Base exception for all MyNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler allows)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MyNotesError):
    """
    Raised when client input fails validation.

    When:    Empty note body on create/update, body that is not valid UTF-8,
             path id outside the 64-bit range.
    HTTP:    400 Bad Request
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


class NotFoundError(MyNotesError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /notes/{id} with an id the store reports as absent.
    HTTP:    404 Not Found

    The stores return an explicit ABSENT result instead of raising; the
    note service converts that result into this exception so the same 404
    is produced for all three operations.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(MyNotesError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, locked database.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The SQL error
        is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
