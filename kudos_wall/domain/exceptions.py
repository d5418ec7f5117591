# kudos_wall/domain/exceptions.py

"""
Domain exceptions for the kudos wall.

These exceptions are framework-free. Each one carries an ``internal_code``
that the exception middleware maps to an HTTP status code, so use cases
never need to know about HTTP.
"""

from enum import Enum
from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for every error raised by the application layer.
    """

    internal_code = "DOMAIN_ERROR"

    def __init__(
            self,
            message: str = "Domain error",
            details: Optional[Dict[str, Any]] = None,
            internal_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if internal_code is not None:
            self.internal_code = internal_code

    def __str__(self) -> str:
        return self.message


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, message: str = "Resource not found", resource_id: Any = None):
        details = {"resource_id": str(resource_id)} if resource_id is not None else None
        super().__init__(message, details=details)


class ResourceAlreadyExistsException(DomainException):
    """Resource already exists (e.g. a registered email or a team name)."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message)


class InvalidCredentialsException(DomainException):
    """
    Wrong email or wrong password.

    Both cases must produce this exact exception with the same message so
    callers cannot tell whether an email is registered.
    """

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class InvalidTokenException(DomainException):
    """
    Token is malformed, tampered with or expired.

    ``reason`` is kept for logs only and is never sent to the client.
    """

    internal_code = "INVALID_TOKEN"

    def __init__(self, message: str = "Unauthorized", reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason


class AuthFailureReason(str, Enum):
    MISSING_TOKEN = "missing token"
    REVOKED = "revoked"
    INVALID_TOKEN = "invalid"
    USER_NOT_FOUND = "user not found"


class AuthenticationFailedException(DomainException):
    """Raised by the authentication strategy when a request cannot be authenticated."""

    internal_code = "UNAUTHENTICATED"

    def __init__(self, reason: AuthFailureReason):
        message = "Token has been revoked" if reason == AuthFailureReason.REVOKED else "Unauthorized"
        super().__init__(message)
        self.reason = reason


class InvalidInputException(DomainException):
    """Invalid input data."""

    internal_code = "INVALID_INPUT"

    def __init__(self, message: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        super().__init__(message, details=fields)


class DatabaseOperationException(DomainException):
    """Error while executing a database operation."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, message: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error
