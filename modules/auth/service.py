"""
Authentication service implementation.

Registers and logs in customers, staff and admins, issuing a session
token for each success.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import ConflictError
from shared.models import Role

from .exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError
from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest
from .passwords import PasswordHasher
from .repository import PrincipalRepository, to_principal
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Holds a request-scoped session; the hasher and token service are
    process-wide and passed in.
    """

    def __init__(
        self,
        session: AsyncSession,
        passwords: PasswordHasher,
        tokens: TokenService,
    ):
        self._session = session
        self._passwords = passwords
        self._tokens = tokens

    def _repository(self, role: Role) -> PrincipalRepository:
        return PrincipalRepository(self._session, role)

    def _respond(self, role: Role, record) -> AuthResponse:
        user = to_principal(role, record)
        return AuthResponse(token=self._tokens.issue(user), user=user)

    async def register(self, role: Role, request: RegisterRequest) -> AuthResponse:
        repository = self._repository(role)

        if await repository.get_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError(request.email)

        extra = {}
        if role is Role.CUSTOMER:
            extra = {"address": request.address, "phone": request.phone}

        password_hash = await self._passwords.hash_async(request.password)
        try:
            record = await repository.create_principal(
                request.name, request.email, password_hash, **extra
            )
        except ConflictError:
            # Lost a race with a concurrent registration
            raise EmailAlreadyRegisteredError(request.email)

        logger.info("Registered %s %s", role.value, request.email)
        return self._respond(role, record)

    async def login(self, role: Role, request: LoginRequest) -> AuthResponse:
        record = await self._repository(role).get_by_email(request.email)

        if record is None:
            await self._passwords.dummy_verify_async()
            raise InvalidCredentialsError()

        if not await self._passwords.verify_async(request.password, record.password):
            raise InvalidCredentialsError()

        return self._respond(role, record)
