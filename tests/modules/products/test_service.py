"""Tests for ProductService against an in-memory store."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.exceptions import ProductNotFoundError
from modules.products.models import ProductCreate, ProductSortField, ProductUpdate
from modules.products.repository import ProductRepository
from modules.products.service import ProductService
from shared.sorting import SortDirection


@pytest.fixture
def service(session) -> ProductService:
    return ProductService(ProductRepository(session))


async def seed(service: ProductService) -> None:
    for name, price, stock in [
        ("Camera", "199.99", 5),
        ("Album", "15.00", 40),
        ("Tripod", "49.50", 5),
    ]:
        await service.create_product(ProductCreate(name=name, price=Decimal(price), stock=stock))


class TestProductService:
    @pytest.mark.asyncio
    async def test_create_and_get(self, service):
        created = await service.create_product(
            ProductCreate(name="Camera", price=199.99, stock=5)
        )

        assert created.prod_id == 1
        assert created.price == Decimal("199.99")
        assert await service.get_product(1) == created

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(ProductNotFoundError) as exc_info:
            await service.get_product(1)
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_list_by_id(self, service):
        await seed(service)
        assert [p.prod_id for p in await service.list_products()] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_update_only_given_fields(self, service):
        await seed(service)
        updated = await service.update_product(1, ProductUpdate(stock=0))
        assert updated.stock == 0
        assert updated.name == "Camera"

    @pytest.mark.asyncio
    async def test_update_missing(self, service):
        with pytest.raises(ProductNotFoundError):
            await service.update_product(5, ProductUpdate(stock=1))

    @pytest.mark.asyncio
    async def test_delete(self, service):
        await seed(service)
        await service.delete_product(2)
        with pytest.raises(ProductNotFoundError):
            await service.delete_product(2)

    @pytest.mark.asyncio
    async def test_sort_desc(self, service):
        await seed(service)
        products = await service.sort_products(ProductSortField.PRICE, SortDirection.DESC)
        assert [p.name for p in products] == ["Camera", "Tripod", "Album"]

    @pytest.mark.asyncio
    async def test_sort_by_two(self, service):
        await seed(service)
        products = await service.sort_products_by_two(ProductSortField.STOCK, ProductSortField.NAME)
        assert [p.name for p in products] == ["Camera", "Tripod", "Album"]


class TestProductModels:
    def test_float_price_kept_exact(self):
        assert ProductCreate(name="Camera", price=0.1, stock=1).price == Decimal("0.1")

    @pytest.mark.parametrize("price", [0, -5, "1.999", 123456789.12])
    def test_bad_price(self, price):
        with pytest.raises(ValidationError):
            ProductCreate(name="Camera", price=price, stock=1)

    @pytest.mark.parametrize("name", ["TV", "Camera 2", "x" * 31])
    def test_bad_name(self, name):
        with pytest.raises(ValidationError):
            ProductCreate(name=name, price=1, stock=1)

    def test_negative_stock(self):
        with pytest.raises(ValidationError):
            ProductCreate(name="Camera", price=1, stock=-1)

    def test_update_rejects_null(self):
        with pytest.raises(ValidationError):
            ProductUpdate(name=None)
