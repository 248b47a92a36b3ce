"""
Product API endpoints.

Listing is staff/admin only; single reads and sorted listings are
public; writes are admin only.
"""

from fastapi import APIRouter, Depends, HTTPException, Path

from api.dependencies import get_product_service
from api.middleware.auth import RequireAdmin, RequireStaff
from shared.sorting import DIRECTION_PATTERN, normalize_direction

from .exceptions import ProductNotFoundError
from .interfaces import IProductService
from .models import Product, ProductCreate, ProductSortField, ProductUpdate

router = APIRouter()


@router.get("", response_model=list[Product], dependencies=[RequireStaff])
async def list_products(
    service: IProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products by id."""
    return await service.list_products()


@router.get("/o/{field}/{direction}", response_model=list[Product])
async def sort_products(
    field: ProductSortField,
    direction: str = Path(..., pattern=DIRECTION_PATTERN),
    service: IProductService = Depends(get_product_service),
) -> list[Product]:
    """List products ordered by one allow-listed field, asc or desc."""
    return await service.sort_products(field, normalize_direction(direction))


@router.get("/sort/two/{first}/{second}", response_model=list[Product])
async def sort_products_by_two(
    first: ProductSortField,
    second: ProductSortField,
    service: IProductService = Depends(get_product_service),
) -> list[Product]:
    """List products ordered by two allow-listed fields, both ascending."""
    return await service.sort_products_by_two(first, second)


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: int = Path(..., gt=0),
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Get a product by id."""
    try:
        return await service.get_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")


@router.post("", response_model=Product, status_code=201, dependencies=[RequireAdmin])
async def create_product(
    request: ProductCreate,
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Create a product."""
    return await service.create_product(request)


@router.put("/{product_id}", response_model=Product, dependencies=[RequireAdmin])
async def update_product(
    request: ProductUpdate,
    product_id: int = Path(..., gt=0),
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Update one or more product fields."""
    try:
        return await service.update_product(product_id, request)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")


@router.delete("/{product_id}", status_code=204, dependencies=[RequireAdmin])
async def delete_product(
    product_id: int = Path(..., gt=0),
    service: IProductService = Depends(get_product_service),
) -> None:
    """Delete a product."""
    try:
        await service.delete_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
