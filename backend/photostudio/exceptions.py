"""
PhotoStudio Backend — Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for each error category.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by the storage layer, integrations, and route handlers.

Exception Hierarchy:
    PhotoStudioError (base)
    ├── ValidationError   → 400 Bad Request (detail returned to the caller)
    ├── NotFoundError     → 404 Not Found
    ├── StorageError      → 500 Internal Server Error (detail logged only)
    └── IntegrationError  → 401 (image host auth failure) / 500 (anything else)

Nothing in this hierarchy is retried automatically.
"""

from typing import Any, Dict, Optional


class PhotoStudioError(Exception):
    """
    Base exception for all PhotoStudio application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client,
                  except for ValidationError where it is the field detail)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PhotoStudioError):
    """
    Raised when client input fails validation.

    When:    Missing or malformed body fields, bad path parameters, an upload
             without a file or with an unsupported type.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid input data",
            "details": {"errors": [{"field": "email", "message": "Field required"}]}
        }
    """

    def __init__(
        self,
        message: str = "Invalid input data",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(PhotoStudioError):
    """
    Raised when a referenced row is absent for an operation that requires one.

    When:    PUT or DELETE /api/portfolio/{id} with an id that matches no row.
    HTTP:    404 Not Found

    The storage layer itself never raises this: a miss there is an explicit
    `None` / `False` result. Route handlers convert it.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class StorageError(PhotoStudioError):
    """
    Raised when the relational store fails.

    When:    Connection lost, constraint violation, statement timeout.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The operation,
    entity, and driver error are kept in `context` and logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class IntegrationError(PhotoStudioError):
    """
    Raised when a third-party service (image host, email relay) fails.

    HTTP:    401 when the image host rejected our credentials, 500 otherwise.

    Attributes:
        service:       "image_host" or "email"
        auth_failure:  True when the upstream reported an authentication failure
    """

    def __init__(
        self,
        service: str,
        message: str = "An external service failed. Please try again later.",
        auth_failure: bool = False,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["service"] = service
        super().__init__(message=message, context=ctx)
        self.service = service
        self.auth_failure = auth_failure

    @property
    def status_code(self) -> int:
        return 401 if self.auth_failure else 500
