"""
Customers module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Customer, CustomerCreate, CustomerUpdate


@runtime_checkable
class ICustomerService(Protocol):
    """
    Interface for customer account management.

    Authorization is the caller's job; these methods assume the
    principal has already been allowed.
    """

    async def list_customers(self) -> list[Customer]:
        ...

    async def get_customer(self, customer_id: int) -> Customer:
        """
        Raises:
            CustomerNotFoundError: If no customer has this id
        """
        ...

    async def create_customer(self, request: CustomerCreate) -> Customer:
        """
        Raises:
            CustomerEmailTakenError: If the email is already registered
        """
        ...

    async def update_customer(self, customer_id: int, request: CustomerUpdate) -> Customer:
        """
        A new password is hashed before it is stored.

        Raises:
            CustomerNotFoundError: If no customer has this id
            CustomerEmailTakenError: If the new email belongs to another customer
        """
        ...

    async def delete_customer(self, customer_id: int) -> None:
        """
        Raises:
            CustomerNotFoundError: If no customer has this id
        """
        ...
