"""
Shared infrastructure for Photostore backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Async SQLAlchemy engine and session factory
- tables: ORM table definitions
- repository: Base repository with error translation
- exceptions: Base exception classes
- sorting: Allow-listed ORDER BY helpers

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings, ensure_runtime_config
from .database import Base, get_engine, get_session, init_models, reset_engine
from .exceptions import (
    PhotostoreError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    StoreError,
    ConfigError,
)
from .models import AuthenticatedPrincipal, Role

__all__ = [
    "Settings",
    "get_settings",
    "ensure_runtime_config",
    "Base",
    "get_engine",
    "get_session",
    "init_models",
    "reset_engine",
    "PhotostoreError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
    "ConfigError",
    "AuthenticatedPrincipal",
    "Role",
]
