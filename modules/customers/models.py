"""
Customers module data models.

Field rules are shared with customer self-registration.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, model_validator

from modules.auth.models import Address, Email, Name, Phone, StrongPassword
from shared.models import CamelModel


class CustomerCreate(BaseModel):
    """Staff-side customer creation; same shape as customer registration."""

    name: Name
    email: Email
    password: StrongPassword
    address: Address = None
    phone: Phone = None


class CustomerUpdate(BaseModel):
    """Partial customer update; at least one field is required."""

    name: Optional[Name] = None
    email: Optional[Email] = None
    password: Optional[StrongPassword] = None
    address: Address = None
    phone: Phone = None

    @model_validator(mode="after")
    def check_fields(self) -> "CustomerUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        for field in ("name", "email", "password"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} must not be null")
        return self


class Customer(CamelModel):
    """A customer as returned by the API. There is no password field."""

    cust_id: int
    name: str
    email: str
    address: Optional[str] = None
    phone: Optional[str] = None
    role: str = "customer"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
