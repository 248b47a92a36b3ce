"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
The environment is set before any application import so the cached
settings, the engine and the module-level app all see the test values.
"""

import os

# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-" + "x" * 64

os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["PASSWORD_HASH_ROUNDS"] = "10"
os.environ.pop("LOG_DIR", None)

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt  # PyJWT
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker

from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import create_engine_from_url, init_models, reset_engine

TEST_ISSUER = "photostore-api"
TEST_AUDIENCE = "photostore-users"

_ID_FIELDS = {"customer": "custId", "staff": "staffId", "admin": "adminId"}


def create_test_token(
    role: Optional[str] = "customer",
    principal_id: int = 1,
    name: str = "Test User",
    email: str = "test@x.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    algorithm: str = "HS512",
    legacy: bool = False,
    extra_claims: Optional[dict] = None,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        role: Role tag; None leaves the role out of the claims
        principal_id: Id placed in the field matching ``role``
        name: Display name claim
        email: Email claim
        expired: If True, creates an expired token
        secret: Signing secret; pass another value for a forged token
        algorithm: Signing algorithm
        legacy: If True, puts the principal fields at the top level
            instead of under ``user``
        extra_claims: Merged into the final claim set

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    user = {"name": name, "email": email}
    if role is not None:
        user["role"] = role
        user[_ID_FIELDS.get(role, "custId")] = principal_id

    payload = {
        "iss": TEST_ISSUER,
        "aud": TEST_AUDIENCE,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
        "jti": str(uuid.uuid4()),
    }
    if legacy:
        payload.update(user)
    else:
        payload["user"] = user
        payload["sub"] = str(principal_id)
    payload.update(extra_claims or {})
    return jwt.encode(payload, secret, algorithm=algorithm)


def auth_header(token: str) -> dict[str, str]:
    """Authorization header carrying ``token`` as a Bearer credential."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, services and engine before and after each test."""
    get_settings.cache_clear()
    reset_container()
    reset_engine()
    yield
    get_settings.cache_clear()
    reset_container()
    reset_engine()


@pytest.fixture
def customer_headers() -> dict[str, str]:
    return auth_header(create_test_token(role="customer", principal_id=1))


@pytest.fixture
def staff_headers() -> dict[str, str]:
    return auth_header(create_test_token(role="staff", principal_id=1, name="Sam Staff"))


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth_header(create_test_token(role="admin", principal_id=1, name="Ada Admin"))


@pytest_asyncio.fixture
async def engine():
    """A fresh in-memory database with every table created."""
    engine = create_engine_from_url("sqlite+aiosqlite://")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """An AsyncSession on the in-memory database."""
    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        yield session
