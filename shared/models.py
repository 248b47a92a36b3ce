"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """The three principal kinds. Each kind is also its role tag."""

    CUSTOMER = "customer"
    STAFF = "staff"
    ADMIN = "admin"


# Fixed-point amount, rendered as a JSON number
Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Base for wire models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AuthenticatedPrincipal(CamelModel):
    """
    Represents an authenticated principal in the system.

    This model is the ``user`` claim of a session token. Exactly one of
    the id fields is set, matching ``role``. It is populated from the
    verified token and made available to route handlers via dependency
    injection.
    """

    cust_id: Optional[int] = Field(None, description="Customer ID")
    staff_id: Optional[int] = Field(None, description="Staff ID")
    admin_id: Optional[int] = Field(None, description="Admin ID")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Login email")
    role: Optional[Role] = Field(None, description="Role tag")

    model_config = ConfigDict(
        frozen=True,  # Make immutable for safety
        extra="ignore",  # Ignore extra fields from older tokens
    )

    @property
    def principal_id(self) -> Optional[int]:
        """The id belonging to this principal's own role, if any."""
        if self.role is Role.CUSTOMER:
            return self.cust_id
        if self.role is Role.STAFF:
            return self.staff_id
        if self.role is Role.ADMIN:
            return self.admin_id
        return None

    def id_for(self, role: Role) -> Optional[int]:
        """The id this principal holds as ``role``; None for other kinds."""
        if self.role is not role:
            return None
        return self.principal_id
