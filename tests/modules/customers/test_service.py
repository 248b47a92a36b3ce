"""Tests for CustomerService against an in-memory store."""

import pytest
from pydantic import ValidationError

from modules.auth.passwords import PasswordHasher
from modules.customers.exceptions import CustomerEmailTakenError, CustomerNotFoundError
from modules.customers.models import CustomerCreate, CustomerUpdate
from modules.customers.repository import CustomerRepository
from modules.customers.service import CustomerService
from shared.tables import CustomerRecord


@pytest.fixture(scope="module")
def passwords() -> PasswordHasher:
    return PasswordHasher(rounds=10)


@pytest.fixture
def service(session, passwords) -> CustomerService:
    return CustomerService(CustomerRepository(session), passwords)


def new_customer(email: str = "ada@x.com", **overrides) -> CustomerCreate:
    return CustomerCreate(
        **{"name": "Ada", "email": email, "password": "S3cure!pass", **overrides}
    )


class TestCustomerService:
    @pytest.mark.asyncio
    async def test_create_hashes_password(self, service, session, passwords):
        created = await service.create_customer(new_customer(address="1 Main St"))

        assert created.cust_id == 1
        assert created.role == "customer"
        assert created.address == "1 Main St"
        assert "password" not in created.model_dump()

        record = await session.get(CustomerRecord, 1)
        assert record.password != "S3cure!pass"
        assert passwords.verify("S3cure!pass", record.password)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service):
        await service.create_customer(new_customer())
        with pytest.raises(CustomerEmailTakenError) as exc_info:
            await service.create_customer(new_customer(email="ADA@x.com"))
        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_get_and_list(self, service):
        await service.create_customer(new_customer())
        await service.create_customer(new_customer(email="grace@x.com", name="Grace"))

        assert (await service.get_customer(2)).name == "Grace"
        assert [c.cust_id for c in await service.list_customers()] == [1, 2]

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(CustomerNotFoundError):
            await service.get_customer(3)

    @pytest.mark.asyncio
    async def test_update_rehashes_password(self, service, session, passwords):
        await service.create_customer(new_customer())
        await service.update_customer(1, CustomerUpdate(password="N3w!secret"))

        record = await session.get(CustomerRecord, 1)
        assert passwords.verify("N3w!secret", record.password)
        assert not passwords.verify("S3cure!pass", record.password)

    @pytest.mark.asyncio
    async def test_update_can_clear_phone(self, service):
        await service.create_customer(new_customer(phone="555"))
        updated = await service.update_customer(1, CustomerUpdate(phone=None))
        assert updated.phone is None
        assert updated.name == "Ada"

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, service):
        await service.create_customer(new_customer())
        await service.create_customer(new_customer(email="grace@x.com"))
        with pytest.raises(CustomerEmailTakenError):
            await service.update_customer(2, CustomerUpdate(email="ada@x.com"))

    @pytest.mark.asyncio
    async def test_update_missing(self, service):
        with pytest.raises(CustomerNotFoundError):
            await service.update_customer(9, CustomerUpdate(name="Nobody"))

    @pytest.mark.asyncio
    async def test_delete(self, service):
        await service.create_customer(new_customer())
        await service.delete_customer(1)
        with pytest.raises(CustomerNotFoundError):
            await service.get_customer(1)
        with pytest.raises(CustomerNotFoundError):
            await service.delete_customer(1)


class TestCustomerUpdate:
    def test_requires_a_field(self):
        with pytest.raises(ValidationError):
            CustomerUpdate()

    def test_weak_password(self):
        with pytest.raises(ValidationError):
            CustomerUpdate(password="weakpass")
