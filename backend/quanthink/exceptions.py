"""
QuanThink Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error cases the API exposes.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       turn them into HTTP responses.
Who:   Raised by stores, services and routes; caught by global handlers.

Exception Hierarchy:
    QuanThinkError (base)
    ├── NotFoundError            → 404 Not Found (empty body)
    ├── DuplicateEmailError      → 400 Bad Request ("Email already exists")
    ├── UnauthorizedError        → 401 Unauthorized (plain-text message)
    │   ├── UserNotFoundError    → "User not found"
    │   └── WrongPasswordError   → "Wrong password"
    └── StorageError             → 500 Internal Server Error (empty body)

    Anything else is caught by the fallback handler and becomes a bare 500.

Response Bodies:
    The web client reads plain-text messages for 400 and 401 and only the
    status code for everything else, so handlers never emit a structured
    error document.
"""

from typing import Any, Dict, Optional


class QuanThinkError(Exception):
    """
    Base exception for all QuanThink application errors.

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


class NotFoundError(QuanThinkError):
    """
    Raised when a requested record does not exist.

    Stores return None for missing records; routes convert that None into
    this exception so the 404 mapping lives in one place.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DuplicateEmailError(QuanThinkError):
    """
    Raised when a user write collides with an already registered email.

    Detected by the unique constraint on users.email at insert/update time,
    so detection and write are a single atomic step.
    """

    def __init__(
        self,
        email: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if email:
            ctx["email"] = email
        super().__init__(message="Email already exists", context=ctx)


class UnauthorizedError(QuanThinkError):
    """Raised when a login attempt cannot be verified."""

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UserNotFoundError(UnauthorizedError):
    """No user is registered under the supplied email."""

    def __init__(self, email: Optional[str] = None):
        super().__init__(message="User not found", context={"email": email})


class WrongPasswordError(UnauthorizedError):
    """The supplied password does not match the stored credential."""

    def __init__(self, email: Optional[str] = None):
        super().__init__(message="Wrong password", context={"email": email})


class StorageError(QuanThinkError):
    """
    Raised when the underlying database operation fails.

    Security Note:
        The client only ever sees a bare 500. The original exception type
        and the operation are recorded in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A storage error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
