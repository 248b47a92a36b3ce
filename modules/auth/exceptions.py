"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses. Token failures all
share one public message; the specific cause goes to the log only.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ValidationError,
)

TOKEN_NOT_VALID = "Token is not valid"


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token fails verification for any reason."""

    def __init__(self, reason: str = "invalid token"):
        super().__init__(TOKEN_NOT_VALID, code="INVALID_TOKEN")
        self.reason = reason


class ExpiredTokenError(InvalidTokenError):
    """Raised when a correctly signed JWT token has expired."""

    def __init__(self, reason: str = "token expired"):
        super().__init__(reason)
        self.code = "TOKEN_EXPIRED"


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No token supplied, authorization denied"):
        super().__init__(message, code="MISSING_TOKEN")


class MissingRoleError(AuthenticationError):
    """Raised when a verified token carries no role at all."""

    def __init__(self, message: str = "Unauthenticated: user missing"):
        super().__init__(message, code="MISSING_ROLE")


class InsufficientPermissionsError(AuthorizationError):
    """Raised when the principal lacks the required role or ownership."""

    def __init__(self, message: str, required: str, has: str | None):
        super().__init__(
            message,
            code="INSUFFICIENT_PERMISSIONS",
            details={"required": required, "has": has},
        )


class InvalidCredentialsError(ValidationError):
    """
    Raised on a failed login.

    Unknown email and wrong password produce the same error so a caller
    cannot probe which accounts exist.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email already used by the same principal kind."""

    def __init__(self, email: str):
        super().__init__(
            "User already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )
