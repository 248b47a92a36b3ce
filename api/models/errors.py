"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    msg: str


class ValidationIssue(BaseModel):
    """One failed field check."""

    message: str
    path: str
    type: str


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    msg: str = "Validation failed"
    details: list[ValidationIssue]
