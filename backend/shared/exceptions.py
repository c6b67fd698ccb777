"""
Base exception classes for the Kraftflix backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class KraftflixError(Exception):
    """
    Base exception for all Kraftflix errors.

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

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(KraftflixError):
    """Resource not found."""

    pass


class ValidationError(KraftflixError):
    """Input validation failed."""

    pass


class AuthenticationError(KraftflixError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(KraftflixError):
    """Authorization failed (authenticated, but not allowed)."""

    pass


class ExternalServiceError(KraftflixError):
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


class StoreUnavailableError(ExternalServiceError):
    """
    The backing data store failed or could not be reached.

    This is never an authentication failure: callers surface it as
    "service unavailable" regardless of which request triggered it.
    """

    def __init__(self, message: str = "Data store unavailable", operation: Optional[str] = None):
        super().__init__(
            message,
            service="store",
            code="STORE_UNAVAILABLE",
            details={"operation": operation} if operation else None,
        )
