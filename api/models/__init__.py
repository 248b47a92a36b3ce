"""API models package."""

from .errors import ErrorResponse, ValidationErrorResponse, ValidationIssue

__all__ = [
    "ErrorResponse",
    "ValidationErrorResponse",
    "ValidationIssue",
]
