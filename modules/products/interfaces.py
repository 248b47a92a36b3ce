"""
Products module interface.
"""

from typing import Protocol, runtime_checkable

from shared.sorting import SortDirection

from .models import Product, ProductCreate, ProductSortField, ProductUpdate


@runtime_checkable
class IProductService(Protocol):
    """Interface for product catalogue operations."""

    async def list_products(self) -> list[Product]:
        """All products, id ascending."""
        ...

    async def get_product(self, product_id: int) -> Product:
        """
        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...

    async def create_product(self, request: ProductCreate) -> Product:
        ...

    async def update_product(self, product_id: int, request: ProductUpdate) -> Product:
        """
        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...

    async def delete_product(self, product_id: int) -> None:
        """
        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...

    async def sort_products(
        self,
        field: ProductSortField,
        direction: SortDirection,
    ) -> list[Product]:
        ...

    async def sort_products_by_two(
        self,
        first: ProductSortField,
        second: ProductSortField,
    ) -> list[Product]:
        """Ordered by ``first`` then ``second``, both ascending."""
        ...
