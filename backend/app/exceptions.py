"""
Employee Directory Backend: Custom Exception Hierarchy
=======================================================

What:  Application-specific exceptions for the failure kinds the API knows.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the store and the services; caught by global handlers.

Exception Hierarchy:
    DirectoryError (base)
    ├── ValidationError   → 400 Bad Request (missing required input)
    ├── NotFoundError     → 404 Not Found (no matching row)
    └── StoreError        → 500 Internal Server Error (persistence failure)
"""

from typing import Any, Dict, Optional


class DirectoryError(Exception):
    """
    Base exception for all employee directory errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info, logged server-side
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(DirectoryError):
    """
    Raised when client input is missing or unusable.

    When:    POST /employees/new without name or email, unknown sort order.
    HTTP:    400 Bad Request

    Only presence checks live here. Type errors in the request body are
    still answered by FastAPI's own 422 handling.
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


class NotFoundError(DirectoryError):
    """
    Raised when a requested resource does not exist.

    When:    GET /employees/details/{id} for an unknown id, or
             GET /employees while the table is empty.
    HTTP:    404 Not Found

    The store returns None for missing rows; services convert that into this
    exception only where the API answers 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"No {resource} found with id {resource_id}"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class StoreError(DirectoryError):
    """
    Raised when a store operation fails.

    What:    Wraps any SQLAlchemyError raised while talking to the database.
    HTTP:    500 Internal Server Error

    The message is the raw driver/ORM message; the API returns it as-is.
    Nothing is rolled back across store calls, so a failure in the middle of
    a multi-step mutation leaves the earlier steps applied.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation
