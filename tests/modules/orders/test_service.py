"""Tests for OrderService against an in-memory store."""

from decimal import Decimal

import pytest

from modules.orders.exceptions import OrderNotFoundError
from modules.orders.models import OrderSortField
from modules.orders.repository import OrderRepository
from modules.orders.service import OrderService
from shared.sorting import SortDirection


@pytest.fixture
def repository(session) -> OrderRepository:
    return OrderRepository(session)


@pytest.fixture
def service(repository) -> OrderService:
    return OrderService(repository)


async def seed(repository: OrderRepository) -> None:
    for cust_id, status, total in [
        (1, "shipped", "30.00"),
        (2, "pending", "99.99"),
        (1, "pending", "5.25"),
    ]:
        await repository.create({"cust_id": cust_id, "status": status, "total": Decimal(total)})


class TestOrderService:
    @pytest.mark.asyncio
    async def test_defaults(self, repository, service):
        await repository.create({"cust_id": 4})

        order = await service.get_order(1)
        assert order.status == "pending"
        assert order.total == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_list_by_id(self, repository, service):
        await seed(repository)
        assert [o.order_id for o in await service.list_orders()] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(OrderNotFoundError) as exc_info:
            await service.get_order(1)
        assert exc_info.value.message == "Order not found"

    @pytest.mark.asyncio
    async def test_delete(self, repository, service):
        await seed(repository)
        await service.delete_order(1)
        assert [o.order_id for o in await service.list_orders()] == [2, 3]
        with pytest.raises(OrderNotFoundError):
            await service.delete_order(1)

    @pytest.mark.asyncio
    async def test_sort_by_total_desc(self, repository, service):
        await seed(repository)
        orders = await service.sort_orders(OrderSortField.TOTAL, SortDirection.DESC)
        assert [o.order_id for o in orders] == [2, 1, 3]

    @pytest.mark.asyncio
    async def test_sort_by_total_asc(self, repository, service):
        await seed(repository)
        orders = await service.sort_orders(OrderSortField.TOTAL, SortDirection.ASC)
        assert [o.order_id for o in orders] == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_sort_by_two(self, repository, service):
        await seed(repository)
        orders = await service.sort_orders_by_two(OrderSortField.STATUS, OrderSortField.TOTAL)
        assert [o.order_id for o in orders] == [3, 2, 1]
