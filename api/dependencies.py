"""
Dependency injection setup for FastAPI.

This module provides the "container" that holds the process-wide
collaborators (password hasher, token service) and the per-request
factories that wire them to a request-scoped database session.

Routes depend on the module interfaces; tests swap implementations
through ``app.dependency_overrides``.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config import get_settings
from shared.database import get_session

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.customers.interfaces import ICustomerService
    from modules.orders.interfaces import IOrderService
    from modules.products.interfaces import IProductService


class ServiceContainer:
    """
    Container for process-wide service instances.

    Instances are created lazily on first access and cached.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._passwords: "PasswordHasher | None" = None
        self._tokens: "TokenService | None" = None

    @property
    def passwords(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._passwords is None:
            from modules.auth.passwords import PasswordHasher
            self._passwords = PasswordHasher(rounds=get_settings().password_hash_rounds)
        return self._passwords

    @property
    def tokens(self) -> "TokenService":
        """
        Get the token service instance.

        Raises:
            ConfigError: If no signing secret is configured
        """
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService.from_settings(get_settings())
        return self._tokens

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances after changing settings.
        """
        self._passwords = None
        self._tokens = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_auth_service(session: AsyncSession = Depends(get_session)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    from modules.auth.service import AuthService

    container = get_container()
    return AuthService(session, container.passwords, container.tokens)


def get_product_service(session: AsyncSession = Depends(get_session)) -> "IProductService":
    """FastAPI dependency for product service."""
    from modules.products.repository import ProductRepository
    from modules.products.service import ProductService

    return ProductService(ProductRepository(session))


def get_customer_service(session: AsyncSession = Depends(get_session)) -> "ICustomerService":
    """FastAPI dependency for customer service."""
    from modules.customers.repository import CustomerRepository
    from modules.customers.service import CustomerService

    return CustomerService(CustomerRepository(session), get_container().passwords)


def get_order_service(session: AsyncSession = Depends(get_session)) -> "IOrderService":
    """FastAPI dependency for order service."""
    from modules.orders.repository import OrderRepository
    from modules.orders.service import OrderService

    return OrderService(OrderRepository(session))
