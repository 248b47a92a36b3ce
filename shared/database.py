"""
Async SQLAlchemy engine and session management.

Provides a lazily-created engine and session factory, plus the FastAPI
dependency that yields one session per request.
"""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from .config import get_settings


class Base(DeclarativeBase):
    """Declarative base shared by all tables."""


# Module-level engine cache
_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None


def normalize_database_url(url: str) -> str:
    """
    Point bare driver URLs at their async drivers.

    ``sqlite://`` becomes ``sqlite+aiosqlite://`` and ``postgresql://``
    becomes ``postgresql+asyncpg://``. URLs naming a driver are kept.
    """
    scheme, sep, rest = url.partition("://")
    if not sep or "+" in scheme:
        return url
    if scheme == "sqlite":
        return f"sqlite+aiosqlite://{rest}"
    if scheme in ("postgresql", "postgres"):
        return f"postgresql+asyncpg://{rest}"
    return url


def create_engine_from_url(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    In-memory SQLite shares a single connection so every session sees the
    same database. File SQLite gets its parent directory created.
    """
    url = normalize_database_url(url)
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite":
        database = parsed.database
        if not database or database == ":memory:":
            return create_async_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)
        return create_async_engine(url, echo=echo)

    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def get_engine() -> AsyncEngine:
    """Get the process-wide engine, creating it from settings on first use."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine_from_url(settings.database_url, echo=settings.database_echo)
    return _engine


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Get the session factory bound to the process-wide engine."""
    global _sessionmaker
    if _sessionmaker is None:
        _sessionmaker = async_sessionmaker(get_engine(), expire_on_commit=False)
    return _sessionmaker


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency: yields a database session for the duration of the request.

    Usage in API endpoint:
        async def endpoint(session: AsyncSession = Depends(get_session)):
            ...
    """
    async with get_sessionmaker()() as session:
        yield session


async def init_models(engine: Optional[AsyncEngine] = None) -> None:
    """Create any missing tables."""
    # Registers the table classes on Base.metadata
    from . import tables  # noqa: F401

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(engine: Optional[AsyncEngine] = None) -> None:
    """Run a trivial query; raises if the store is unreachable."""
    engine = engine or get_engine()
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def dispose_engine() -> None:
    """Close pooled connections and forget the cached engine."""
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _sessionmaker = None


def reset_engine() -> None:
    """
    Forget the cached engine without disposing it.

    Useful for testing or when configuration changes.
    """
    global _engine, _sessionmaker
    _engine = None
    _sessionmaker = None
