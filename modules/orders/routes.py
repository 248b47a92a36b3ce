"""
Order API endpoints.

All reads are staff/admin only; deletion is admin only.
"""

from fastapi import APIRouter, Depends, HTTPException, Path

from api.dependencies import get_order_service
from api.middleware.auth import RequireAdmin, RequireStaff
from shared.sorting import DIRECTION_PATTERN, normalize_direction

from .exceptions import OrderNotFoundError
from .interfaces import IOrderService
from .models import Order, OrderSortField

router = APIRouter()


@router.get("", response_model=list[Order], dependencies=[RequireStaff])
async def list_orders(
    service: IOrderService = Depends(get_order_service),
) -> list[Order]:
    return await service.list_orders()


@router.get("/o/{field}/{direction}", response_model=list[Order], dependencies=[RequireStaff])
async def sort_orders(
    field: OrderSortField,
    direction: str = Path(..., pattern=DIRECTION_PATTERN),
    service: IOrderService = Depends(get_order_service),
) -> list[Order]:
    """List orders ordered by one allow-listed field, asc or desc."""
    return await service.sort_orders(field, normalize_direction(direction))


@router.get(
    "/sort/two/{first}/{second}",
    response_model=list[Order],
    dependencies=[RequireStaff],
)
async def sort_orders_by_two(
    first: OrderSortField,
    second: OrderSortField,
    service: IOrderService = Depends(get_order_service),
) -> list[Order]:
    return await service.sort_orders_by_two(first, second)


@router.get("/{order_id}", response_model=Order, dependencies=[RequireStaff])
async def get_order(
    order_id: int = Path(..., gt=0),
    service: IOrderService = Depends(get_order_service),
) -> Order:
    try:
        return await service.get_order(order_id)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail="Order not found")


@router.delete("/{order_id}", status_code=204, dependencies=[RequireAdmin])
async def delete_order(
    order_id: int = Path(..., gt=0),
    service: IOrderService = Depends(get_order_service),
) -> None:
    """Delete an order."""
    try:
        await service.delete_order(order_id)
    except OrderNotFoundError:
        raise HTTPException(status_code=404, detail="Order not found")
