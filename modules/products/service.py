"""
Products service implementation.
"""

import logging

from shared.sorting import SortDirection

from .exceptions import ProductNotFoundError
from .interfaces import IProductService
from .models import Product, ProductCreate, ProductSortField, ProductUpdate
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """Product catalogue backed by ProductRepository."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def list_products(self) -> list[Product]:
        return [Product.model_validate(r) for r in await self._repository.list_all()]

    async def get_product(self, product_id: int) -> Product:
        record = await self._repository.get(product_id)
        if record is None:
            raise ProductNotFoundError(product_id)
        return Product.model_validate(record)

    async def create_product(self, request: ProductCreate) -> Product:
        record = await self._repository.create(request.model_dump())
        logger.info("Created product %s", record.prod_id)
        return Product.model_validate(record)

    async def update_product(self, product_id: int, request: ProductUpdate) -> Product:
        record = await self._repository.update(product_id, request.model_dump(exclude_unset=True))
        if record is None:
            raise ProductNotFoundError(product_id)
        return Product.model_validate(record)

    async def delete_product(self, product_id: int) -> None:
        if not await self._repository.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.info("Deleted product %s", product_id)

    async def sort_products(
        self,
        field: ProductSortField,
        direction: SortDirection,
    ) -> list[Product]:
        records = await self._repository.list_sorted([field], direction)
        return [Product.model_validate(r) for r in records]

    async def sort_products_by_two(
        self,
        first: ProductSortField,
        second: ProductSortField,
    ) -> list[Product]:
        records = await self._repository.list_sorted([first, second])
        return [Product.model_validate(r) for r in records]
