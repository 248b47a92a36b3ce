"""
Orders module interface.
"""

from typing import Protocol, runtime_checkable

from shared.sorting import SortDirection

from .models import Order, OrderSortField


@runtime_checkable
class IOrderService(Protocol):
    """
    Interface for order reads and removal.

    Orders are read-only through the API apart from admin deletion.
    """

    async def list_orders(self) -> list[Order]:
        """All orders, id ascending."""
        ...

    async def get_order(self, order_id: int) -> Order:
        """
        Raises:
            OrderNotFoundError: If no order has this id
        """
        ...

    async def delete_order(self, order_id: int) -> None:
        """
        Raises:
            OrderNotFoundError: If no order has this id
        """
        ...

    async def sort_orders(self, field: OrderSortField, direction: SortDirection) -> list[Order]:
        ...

    async def sort_orders_by_two(
        self,
        first: OrderSortField,
        second: OrderSortField,
    ) -> list[Order]:
        """Ordered by ``first`` then ``second``, both ascending."""
        ...
