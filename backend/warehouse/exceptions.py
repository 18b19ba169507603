"""
Warehouse Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the failure modes of the API.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) translate
       them into JSON error responses with the matching HTTP status.
Who:   Raised by services; caught by the handlers in main.py.

Exception Hierarchy:
    WarehouseError (base)
    ├── ValidationError   → 400 Bad Request
    └── DatabaseError     → 500 Internal Server Error

Duplicate user creation is not an error at all: the insert is a no-op and
the request succeeds.
"""

from typing import Any, Dict, Optional


class WarehouseError(Exception):
    """
    Base exception for all Warehouse Backend errors.

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


class ValidationError(WarehouseError):
    """
    Raised when a required request field is missing.

    HTTP:    400 Bad Request

    Example response:
        {"error": "Missing 'data' in request body", "request_id": "a1b2c3d4"}
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


class DatabaseError(WarehouseError):
    """
    Raised when a database statement fails.

    When:    Connection lost, constraint violation, unserializable payload.
    HTTP:    500 Internal Server Error

    The message is a generic per-operation sentence ("Failed to fetch
    schedule"). Driver error details go to the server log through
    ``context`` and are never part of the response body.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
