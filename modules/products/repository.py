"""
Product repository for database access.
"""

from typing import Sequence

from shared.repository import BaseRepository
from shared.sorting import SortDirection, order_clauses
from shared.tables import ProductRecord

from .models import ProductSortField

SORT_COLUMNS = {
    ProductSortField.PROD_ID: ProductRecord.prod_id,
    ProductSortField.NAME: ProductRecord.name,
    ProductSortField.PRICE: ProductRecord.price,
    ProductSortField.STOCK: ProductRecord.stock,
    ProductSortField.CREATED_AT: ProductRecord.created_at,
}


class ProductRepository(BaseRepository[ProductRecord]):
    """
    Repository for product data access.

    Note: This repository does NOT perform authorization checks.
    """

    model = ProductRecord

    async def list_sorted(
        self,
        fields: Sequence[ProductSortField],
        direction: SortDirection = SortDirection.ASC,
    ) -> list[ProductRecord]:
        """List products ordered by allow-listed fields."""
        return await self.list_all(order_clauses(SORT_COLUMNS, fields, direction))
