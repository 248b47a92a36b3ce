"""
ORM table definitions.

One class per table. Principal tables share their columns through
``PrincipalColumns``; each keeps its own id column name so rows map
directly onto the token claim fields (custId, staffId, adminId).
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp column.

    SQLite stores no offset, so naive values read back are tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class TimestampColumns:
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=_utcnow, onupdate=_utcnow
    )


class PrincipalColumns(TimestampColumns):
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    # Stored lowercased; uniqueness is per table
    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)


class CustomerRecord(PrincipalColumns, Base):
    __tablename__ = "customers"

    cust_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(40), nullable=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="customer")

    def __repr__(self):
        return f"<Customer {self.cust_id} {self.email}>"


class StaffRecord(PrincipalColumns, Base):
    __tablename__ = "staff"

    staff_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="staff")

    def __repr__(self):
        return f"<Staff {self.staff_id} {self.email}>"


class AdminRecord(PrincipalColumns, Base):
    __tablename__ = "admins"

    admin_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="admin")

    def __repr__(self):
        return f"<Admin {self.admin_id} {self.email}>"


class ProductRecord(TimestampColumns, Base):
    __tablename__ = "products"

    prod_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Product {self.prod_id} {self.name}>"


class OrderRecord(TimestampColumns, Base):
    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Plain integer reference; deleting a customer leaves its orders alone
    cust_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="pending")
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))

    def __repr__(self):
        return f"<Order {self.order_id} {self.status}>"
