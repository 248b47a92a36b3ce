"""
Authentication module data models.

Request bodies for register/login and the auth response. The field types
defined here are reused by the customers module so an account created
by staff obeys the same rules as a self-registered one.
"""

import re
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    EmailStr,
    Field,
    StringConstraints,
)

from shared.models import AuthenticatedPrincipal

STRONG_PASSWORD_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[!@#$%^&*])[A-Za-z\d!@#$%^&*]{8,}$"
)
STRONG_PASSWORD_MESSAGE = (
    "Password must contain at least 1 uppercase letter, 1 lowercase letter, "
    "1 number, and 1 special character."
)
MAX_EMAIL_LENGTH = 254
# bcrypt reads only the first 72 bytes; the allowed charset is ASCII
MAX_PASSWORD_LENGTH = 72


def check_strong_password(value: str) -> str:
    if not STRONG_PASSWORD_RE.match(value):
        raise ValueError(STRONG_PASSWORD_MESSAGE)
    return value


def normalize_email(value):
    """Trim and lowercase; emails are compared case-insensitively."""
    if isinstance(value, str):
        value = value.strip().lower()
        if len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must be at most {MAX_EMAIL_LENGTH} characters long")
    return value


def blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=60)]
Email = Annotated[EmailStr, BeforeValidator(normalize_email)]
StrongPassword = Annotated[
    str,
    StringConstraints(min_length=8, max_length=MAX_PASSWORD_LENGTH),
    AfterValidator(check_strong_password),
]
Address = Annotated[
    Optional[Annotated[str, StringConstraints(max_length=120)]],
    BeforeValidator(blank_to_none),
]
Phone = Annotated[
    Optional[Annotated[str, StringConstraints(max_length=40)]],
    BeforeValidator(blank_to_none),
]


class RegisterRequest(BaseModel):
    """
    Registration body for any principal kind.

    ``address`` and ``phone`` only apply to customers and are ignored for
    staff and admin registrations.
    """

    name: Name
    email: Email
    password: StrongPassword
    address: Address = None
    phone: Phone = None


class LoginRequest(BaseModel):
    """Login body. The password is only checked for presence here."""

    email: Email
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Returned by register and login."""

    token: str = Field(..., description="Signed session token")
    user: AuthenticatedPrincipal = Field(..., description="Claims embedded in the token")
