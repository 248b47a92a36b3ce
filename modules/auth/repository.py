"""
Credential store access for the three principal tables.
"""

from typing import Any, Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.models import AuthenticatedPrincipal, Role
from shared.repository import BaseRepository
from shared.tables import AdminRecord, CustomerRecord, StaffRecord

PrincipalRecord = Union[CustomerRecord, StaffRecord, AdminRecord]

RECORDS: dict[Role, type] = {
    Role.CUSTOMER: CustomerRecord,
    Role.STAFF: StaffRecord,
    Role.ADMIN: AdminRecord,
}

ID_FIELDS: dict[Role, str] = {
    Role.CUSTOMER: "cust_id",
    Role.STAFF: "staff_id",
    Role.ADMIN: "admin_id",
}


def to_principal(role: Role, record: PrincipalRecord) -> AuthenticatedPrincipal:
    """Build the token claims for a stored principal. The hash never leaves here."""
    return AuthenticatedPrincipal(
        **{ID_FIELDS[role]: getattr(record, ID_FIELDS[role])},
        name=record.name,
        email=record.email,
        role=role,
    )


class PrincipalRepository(BaseRepository[Any]):
    """
    Repository for one principal kind.

    Emails are unique within the kind only; the same address may hold
    a customer, a staff and an admin account independently.
    """

    conflict_message = "User already registered"

    def __init__(self, session: AsyncSession, role: Role) -> None:
        super().__init__(session)
        self.role = role
        self.model = RECORDS[role]

    async def get_by_email(self, email: str) -> Optional[PrincipalRecord]:
        stmt = select(self.model).where(self.model.email == email.strip().lower())
        async with self._guard(f"{self.model.__tablename__}.get_by_email"):
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()

    async def create_principal(
        self,
        name: str,
        email: str,
        password_hash: str,
        **extra: Any,
    ) -> PrincipalRecord:
        values = {
            "name": name,
            "email": email.strip().lower(),
            "password": password_hash,
            "role": self.role.value,
            **extra,
        }
        return await self.create(values)
