"""
Base exception classes for the Photostore backend.

Each module should define its own exceptions that inherit from these bases.
Every base carries the HTTP status it maps to, so the API layer can render
any of them without knowing the concrete subclass.
"""

from typing import Optional, Any


class PhotostoreError(Exception):
    """
    Base exception for all Photostore errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details if details is not None else {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and internal APIs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(PhotostoreError):
    """Input validation failed. ``details`` is a list of per-field issues."""

    status_code = 400


class AuthenticationError(PhotostoreError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(PhotostoreError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(PhotostoreError):
    """Resource not found."""

    status_code = 404


class ConflictError(PhotostoreError):
    """A uniqueness constraint was violated."""

    status_code = 409


class StoreError(PhotostoreError):
    """The store failed in a way the caller cannot fix."""

    status_code = 500

    def __init__(
        self,
        message: str,
        operation: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.operation = operation
        self.details["operation"] = operation


class ConfigError(PhotostoreError):
    """Required configuration is missing or invalid."""

    status_code = 500
