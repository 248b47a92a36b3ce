"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
AsyncSession access, single-table CRUD, and translation of SQLAlchemy
errors into Photostore exceptions.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic, Optional, Sequence, TypeVar

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .database import Base
from .exceptions import ConflictError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - AsyncSession access via self._session
    - get / list / create / update / delete on ``model``
    - IntegrityError -> ConflictError, other SQLAlchemyError -> StoreError

    Every write commits exactly once. Subclasses set ``model`` and
    ``conflict_message`` and add domain-specific queries.

    Example:
        class ProductRepository(BaseRepository[ProductRecord]):
            model = ProductRecord
    """

    model: ClassVar[type]
    conflict_message: ClassVar[str] = "Resource already exists"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the repository with a session.

        Args:
            session: Request-scoped AsyncSession for database operations.
        """
        self._session = session

    @property
    def _pk(self) -> ColumnElement:
        return self.model.__mapper__.primary_key[0]

    @asynccontextmanager
    async def _guard(self, operation: str):
        """Translate store failures raised inside the block."""
        try:
            yield
        except IntegrityError as e:
            await self._session.rollback()
            logger.info("%s: integrity error: %s", operation, e.orig)
            raise ConflictError(self.conflict_message, code="CONFLICT") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("%s: store error: %s", operation, e, exc_info=True)
            raise StoreError("Server error", operation=operation) from e

    async def get(self, record_id: int) -> Optional[T]:
        async with self._guard(f"{self.model.__tablename__}.get"):
            return await self._session.get(self.model, record_id)

    async def list_all(self, order_by: Sequence[ColumnElement] = ()) -> list[T]:
        """List all rows, primary key ascending unless ``order_by`` is given."""
        stmt = select(self.model).order_by(*(order_by or (self._pk.asc(),)))
        async with self._guard(f"{self.model.__tablename__}.list"):
            result = await self._session.execute(stmt)
            return list(result.scalars().all())

    async def create(self, values: dict[str, Any]) -> T:
        record = self.model(**values)
        async with self._guard(f"{self.model.__tablename__}.create"):
            self._session.add(record)
            await self._session.commit()
        return record

    async def update(self, record_id: int, values: dict[str, Any]) -> Optional[T]:
        """Apply ``values`` to the row; returns None if it does not exist."""
        async with self._guard(f"{self.model.__tablename__}.update"):
            record = await self._session.get(self.model, record_id)
            if record is None:
                return None
            for key, value in values.items():
                setattr(record, key, value)
            await self._session.commit()
        return record

    async def delete(self, record_id: int) -> bool:
        """Delete the row; returns False if it did not exist."""
        stmt = delete(self.model).where(self._pk == record_id)
        async with self._guard(f"{self.model.__tablename__}.delete"):
            result = await self._session.execute(stmt)
            await self._session.commit()
        return result.rowcount > 0
