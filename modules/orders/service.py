"""
Orders service implementation.
"""

import logging

from shared.sorting import SortDirection

from .exceptions import OrderNotFoundError
from .interfaces import IOrderService
from .models import Order, OrderSortField
from .repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService(IOrderService):
    def __init__(self, repository: OrderRepository):
        self._repository = repository

    async def list_orders(self) -> list[Order]:
        return [Order.model_validate(r) for r in await self._repository.list_all()]

    async def get_order(self, order_id: int) -> Order:
        record = await self._repository.get(order_id)
        if record is None:
            raise OrderNotFoundError(order_id)
        return Order.model_validate(record)

    async def delete_order(self, order_id: int) -> None:
        if not await self._repository.delete(order_id):
            raise OrderNotFoundError(order_id)
        logger.info("Deleted order %s", order_id)

    async def sort_orders(self, field: OrderSortField, direction: SortDirection) -> list[Order]:
        records = await self._repository.list_sorted([field], direction)
        return [Order.model_validate(r) for r in records]

    async def sort_orders_by_two(
        self,
        first: OrderSortField,
        second: OrderSortField,
    ) -> list[Order]:
        records = await self._repository.list_sorted([first, second])
        return [Order.model_validate(r) for r in records]
