"""
Order repository for database access.
"""

from typing import Sequence

from shared.repository import BaseRepository
from shared.sorting import SortDirection, order_clauses
from shared.tables import OrderRecord

from .models import OrderSortField

SORT_COLUMNS = {
    OrderSortField.ORDER_ID: OrderRecord.order_id,
    OrderSortField.TOTAL: OrderRecord.total,
    OrderSortField.STATUS: OrderRecord.status,
    OrderSortField.CREATED_AT: OrderRecord.created_at,
}


class OrderRepository(BaseRepository[OrderRecord]):
    """
    Repository for order rows.

    ``cust_id`` is a plain column; deleting a customer leaves their
    orders untouched.
    """

    model = OrderRecord

    async def list_sorted(
        self,
        fields: Sequence[OrderSortField],
        direction: SortDirection = SortDirection.ASC,
    ) -> list[OrderRecord]:
        return await self.list_all(order_clauses(SORT_COLUMNS, fields, direction))

