"""
Session token issuance and verification.

Tokens are HS512-signed JWTs carrying the principal under a ``user``
claim plus iss/aud/exp/iat/jti/sub. Verification accepts exactly one
algorithm, so "none" and asymmetric algorithms are always rejected.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.exceptions import ConfigError
from shared.models import AuthenticatedPrincipal

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS512"


class TokenService:
    """
    Issues and verifies signed session tokens.

    Tokens are never stored or revoked server-side; they expire after
    ``ttl``. The ``jti`` claim is fresh per token and informational only.
    """

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        ttl: timedelta,
    ):
        if not secret:
            raise ConfigError("Token signing secret is not configured")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            ttl=settings.token_ttl,
        )

    def issue(self, principal: AuthenticatedPrincipal, now: Optional[datetime] = None) -> str:
        """
        Sign a token for ``principal``.

        ``sub`` is the principal's own id as a string.
        """
        now = now or datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "user": principal.model_dump(mode="json", by_alias=True),
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "exp": now + self._ttl,
            "jti": str(uuid.uuid4()),
        }
        if principal.principal_id is not None:
            payload["sub"] = str(principal.principal_id)
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def decode(self, token: Optional[str]) -> dict[str, Any]:
        """
        Verify signature, algorithm, expiry, issuer and audience.

        Returns:
            The full claim set

        Raises:
            MissingTokenError: If no token was given
            ExpiredTokenError: If the token is correctly signed but expired
            InvalidTokenError: On any other verification failure
        """
        if not token:
            raise MissingTokenError()

        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e)) from e

    def verify(self, token: Optional[str]) -> AuthenticatedPrincipal:
        """
        Verify ``token`` and return the principal it asserts.

        Tokens issued before the ``user`` claim existed carry the principal
        fields at the top level; both shapes normalize to the same model.
        """
        claims = self.decode(token)
        user = claims.get("user")
        if not isinstance(user, dict):
            user = claims

        try:
            return AuthenticatedPrincipal.model_validate(user)
        except PydanticValidationError as e:
            raise InvalidTokenError(f"malformed user claim: {e.error_count()} error(s)") from e
