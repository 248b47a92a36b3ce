"""
Customers module.

Customer account management for staff, with self-service reads and
updates for the customer who owns the record.

Public API:
- ICustomerService: Interface for customer operations
- Customer, CustomerCreate, CustomerUpdate: wire models
- CustomerNotFoundError, CustomerEmailTakenError
"""

from .interfaces import ICustomerService
from .models import Customer, CustomerCreate, CustomerUpdate
from .exceptions import CustomerEmailTakenError, CustomerNotFoundError

__all__ = [
    "ICustomerService",
    "Customer",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerEmailTakenError",
    "CustomerNotFoundError",
]
