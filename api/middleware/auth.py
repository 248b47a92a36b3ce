"""
JWT Authentication middleware.

Reads the session token, verifies it, and exposes the authenticated
principal and the role policies as FastAPI dependencies.

Token transport, in order of preference:
    Authorization: Bearer <token>
    x-auth-token: <token>        (legacy)
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from modules.auth import policy
from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.tokens import TokenService
from shared.models import AuthenticatedPrincipal, Role

from ..dependencies import get_token_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)
# Legacy header extractor
legacy_token_scheme = APIKeyHeader(name="x-auth-token", auto_error=False)


def extract_token(
    credentials: Optional[HTTPAuthorizationCredentials],
    legacy_token: Optional[str],
) -> Optional[str]:
    """Prefer the Bearer credential, fall back to the legacy header."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return legacy_token or None


async def get_current_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    legacy_token: Optional[str] = Depends(legacy_token_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedPrincipal:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in principal. The
    principal is also stored on ``request.state.principal``.

    Usage:
        @router.get("/protected")
        async def protected_route(
            principal: AuthenticatedPrincipal = Depends(get_current_principal),
        ):
            return {"role": principal.role}
    """
    token = extract_token(credentials, legacy_token)
    if token is None:
        logger.info("Auth failed: no token provided")
        raise MissingTokenError()

    try:
        principal = tokens.verify(token)
    except InvalidTokenError as e:
        logger.info("Auth failed: invalid token (%s)", e.reason)
        raise

    request.state.principal = principal
    return principal


async def require_staff(
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> AuthenticatedPrincipal:
    """Dependency: staff or admin."""
    policy.require_staff_or_admin(principal)
    return principal


async def require_admin_role(
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> AuthenticatedPrincipal:
    """Dependency: admin only."""
    policy.require_admin(principal)
    return principal


def allow_self_or_role(owner_role: Role, *roles: Role, param: str = "id"):
    """
    Build a dependency allowing the record's own principal or any of ``roles``.

    ``param`` names the path parameter holding the record id. The raw
    value is parsed here so the policy only ever sees an int or None.

    Usage:
        @router.get("/{customer_id}")
        async def get_customer(
            customer_id: int,
            principal=Depends(allow_self_or_role(Role.CUSTOMER, Role.STAFF, Role.ADMIN,
                                                 param="customer_id")),
        ): ...
    """

    async def dependency(
        request: Request,
        principal: AuthenticatedPrincipal = Depends(get_current_principal),
    ) -> AuthenticatedPrincipal:
        resource_id = policy.parse_resource_id(request.path_params.get(param))
        policy.require_self_or_role(principal, owner_role, resource_id, roles)
        return principal

    return dependency


# Type aliases for cleaner route definitions
RequireStaff = Depends(require_staff)
RequireAdmin = Depends(require_admin_role)
