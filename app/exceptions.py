"""
Book Catalog Backend — Custom Exception Hierarchy
==================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and middleware; caught by global handlers.
When:  During request processing when recoverable errors occur.

Exception Hierarchy:
    BookCatalogError (base)
    ├── ValidationError          → 400 Bad Request (e.g. invalid ISBN)
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 409 Conflict (duplicate ISBN)
    └── DatabaseError            → 500 Internal Server Error

Malformed request payloads (wrong field type, bad UUID, unknown fields) are
rejected earlier by FastAPI's RequestValidationError and mapped to 400 in main.py.
Rate limiting (429) is answered directly by RateLimitMiddleware.
"""

from typing import Any, Dict, Optional


class BookCatalogError(Exception):
    """
    Base exception for all application errors.

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


class ValidationError(BookCatalogError):
    """
    Raised when client input passes schema validation but fails a business rule.

    When:    ISBN has the wrong length, non-digit characters, or a bad check digit.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "bad_request",
            "message": "Invalid ISBN",
            "details": {"field": "ISBN"}
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


class NotFoundError(BookCatalogError):
    """
    Raised when a requested resource does not exist.

    When:    The book id is unknown, or the book has been soft-deleted.
    HTTP:    404 Not Found

    The resource id is kept in context only; the client sees a generic
    "<Resource> not found" message.
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


class ConflictError(BookCatalogError):
    """
    Raised when a write would violate a uniqueness rule.

    When:    Creating a book whose ISBN is already used by a non-deleted book.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(BookCatalogError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, driver error, etc.
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
