"""
Products module data models.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field, StringConstraints, model_validator

from shared.models import CamelModel, Money


def _float_to_decimal(value):
    # str() first so 199.99 stays 199.99 instead of its binary expansion
    if isinstance(value, float):
        return Decimal(str(value))
    return value


ProductName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=30, pattern=r"^[A-Za-z\s]+$"),
]
Price = Annotated[
    Decimal,
    BeforeValidator(_float_to_decimal),
    Field(gt=0, max_digits=10, decimal_places=2),
]
Stock = Annotated[int, Field(ge=0)]


class ProductSortField(str, Enum):
    """Columns a product listing may be ordered by."""

    PROD_ID = "prodId"
    NAME = "name"
    PRICE = "price"
    STOCK = "stock"
    CREATED_AT = "createdAt"


class ProductCreate(BaseModel):
    """Request to create a product."""

    name: ProductName = Field(..., description="Letters and spaces, 3-30 chars")
    price: Price = Field(..., description="Unit price, two decimals at most")
    stock: Stock = Field(..., description="Units on hand")


class ProductUpdate(BaseModel):
    """Partial product update; at least one field is required."""

    name: Optional[ProductName] = None
    price: Optional[Price] = None
    stock: Optional[Stock] = None

    @model_validator(mode="after")
    def check_fields(self) -> "ProductUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field} must not be null")
        return self


class Product(CamelModel):
    """A product as returned by the API."""

    prod_id: int
    name: str
    price: Money
    stock: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
