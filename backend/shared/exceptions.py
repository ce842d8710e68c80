"""
Base exception classes for the PriceBite backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class PriceBiteError(Exception):
    """
    Base exception for all PriceBite errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(PriceBiteError):
    """Resource not found."""

    pass


class ValidationError(PriceBiteError):
    """Input validation failed."""

    pass


class ConflictError(PriceBiteError):
    """Resource already exists."""

    pass


class AuthenticationError(PriceBiteError):
    """Authentication failed (missing or rejected credentials)."""

    pass


class AuthorizationError(PriceBiteError):
    """Credential was presented but is not acceptable."""

    pass


class ExternalServiceError(PriceBiteError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
