"""
Customers service implementation.
"""

import logging

from modules.auth.passwords import PasswordHasher
from shared.exceptions import ConflictError
from shared.models import Role

from .exceptions import CustomerEmailTakenError, CustomerNotFoundError
from .interfaces import ICustomerService
from .models import Customer, CustomerCreate, CustomerUpdate
from .repository import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService(ICustomerService):
    """Customer accounts backed by CustomerRepository."""

    def __init__(self, repository: CustomerRepository, passwords: PasswordHasher):
        self._repository = repository
        self._passwords = passwords

    async def list_customers(self) -> list[Customer]:
        return [Customer.model_validate(r) for r in await self._repository.list_all()]

    async def get_customer(self, customer_id: int) -> Customer:
        record = await self._repository.get(customer_id)
        if record is None:
            raise CustomerNotFoundError(customer_id)
        return Customer.model_validate(record)

    async def create_customer(self, request: CustomerCreate) -> Customer:
        if await self._repository.get_by_email(request.email) is not None:
            raise CustomerEmailTakenError(request.email)

        values = request.model_dump()
        values["password"] = await self._passwords.hash_async(request.password)
        values["role"] = Role.CUSTOMER.value
        try:
            record = await self._repository.create(values)
        except ConflictError:
            raise CustomerEmailTakenError(request.email)

        logger.info("Created customer %s", record.cust_id)
        return Customer.model_validate(record)

    async def update_customer(self, customer_id: int, request: CustomerUpdate) -> Customer:
        values = request.model_dump(exclude_unset=True)
        if values.get("password"):
            values["password"] = await self._passwords.hash_async(values["password"])

        try:
            record = await self._repository.update(customer_id, values)
        except ConflictError:
            raise CustomerEmailTakenError(values.get("email", ""))

        if record is None:
            raise CustomerNotFoundError(customer_id)
        return Customer.model_validate(record)

    async def delete_customer(self, customer_id: int) -> None:
        if not await self._repository.delete(customer_id):
            raise CustomerNotFoundError(customer_id)
        logger.info("Deleted customer %s", customer_id)
