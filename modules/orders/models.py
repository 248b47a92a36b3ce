"""
Orders module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from shared.models import CamelModel, Money


class OrderSortField(str, Enum):
    """Columns an order listing may be ordered by."""

    ORDER_ID = "orderId"
    TOTAL = "total"
    STATUS = "status"
    CREATED_AT = "createdAt"


class Order(CamelModel):
    """An order as returned by the API. Line items are not modelled."""

    order_id: int
    cust_id: int
    status: str = "pending"
    total: Money
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
