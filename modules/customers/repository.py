"""
Customer repository for database access.
"""

from typing import Optional

from sqlalchemy import select

from shared.repository import BaseRepository
from shared.tables import CustomerRecord


class CustomerRepository(BaseRepository[CustomerRecord]):
    """
    Repository for customer rows.

    Rows carry the password hash; the service maps them to models that
    do not.
    """

    model = CustomerRecord
    conflict_message = "Email already registered"

    async def get_by_email(self, email: str) -> Optional[CustomerRecord]:
        stmt = select(CustomerRecord).where(CustomerRecord.email == email.strip().lower())
        async with self._guard("customers.get_by_email"):
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()
