"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import Role

from .models import AuthResponse, LoginRequest, RegisterRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, role: Role, request: RegisterRequest) -> AuthResponse:
        """
        Create a principal of kind ``role`` and sign a token for it.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken for this kind
        """
        ...

    async def login(self, role: Role, request: LoginRequest) -> AuthResponse:
        """
        Check credentials for a principal of kind ``role``.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...
