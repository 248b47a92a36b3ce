"""
Authentication module.

Handles password hashing, token issuance and verification, the
access-control policy, and registration/login.

Public API:
- IAuthService: Interface for auth operations
- TokenService, PasswordHasher: process-wide auth collaborators
- RegisterRequest, LoginRequest, AuthResponse: wire models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest
from .passwords import PasswordHasher
from .tokens import TOKEN_ALGORITHM, TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    MissingRoleError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Collaborators
    "PasswordHasher",
    "TokenService",
    "TOKEN_ALGORITHM",
    # Models
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "MissingRoleError",
    "InsufficientPermissionsError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
]
