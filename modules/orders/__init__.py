"""
Orders module.

Staff/admin order listing and lookup with allow-listed sorting, and
admin deletion.

Public API:
- IOrderService: Interface for order operations
- Order, OrderSortField: wire models
- OrderNotFoundError
"""

from .interfaces import IOrderService
from .models import Order, OrderSortField
from .exceptions import OrderNotFoundError

__all__ = [
    "IOrderService",
    "Order",
    "OrderSortField",
    "OrderNotFoundError",
]
