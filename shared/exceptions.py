"""
Base exception classes for the Standoff backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code, so choosing the
right base is what decides the response a client sees.
"""

from typing import Optional, Any


class StandoffError(Exception):
    """
    Base exception for all Standoff errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

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
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class NotFoundError(StandoffError):
    """Resource not found."""

    status_code = 404


class ValidationError(StandoffError):
    """Input validation failed."""

    status_code = 400


class BusinessRuleError(StandoffError):
    """Request is well-formed but violates a product rule."""

    status_code = 400


class AuthorizationError(StandoffError):
    """Caller is not allowed to perform the operation."""

    status_code = 403


class StorageError(StandoffError):
    """Reading or writing the record store failed."""

    status_code = 500

    def __init__(
        self,
        message: str,
        collection: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.collection = collection
        self.details["collection"] = collection
