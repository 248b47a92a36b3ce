"""
Products module.

Admin-owned product catalogue with public reads and allow-listed sorting.

Public API:
- IProductService: Interface for catalogue operations
- Product, ProductCreate, ProductUpdate, ProductSortField: wire models
- ProductNotFoundError
"""

from .interfaces import IProductService
from .models import Product, ProductCreate, ProductSortField, ProductUpdate
from .exceptions import ProductNotFoundError

__all__ = [
    "IProductService",
    "Product",
    "ProductCreate",
    "ProductSortField",
    "ProductUpdate",
    "ProductNotFoundError",
]
