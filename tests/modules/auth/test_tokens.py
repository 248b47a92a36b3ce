"""Tests for session token issuance and verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from modules.auth.exceptions import (
    TOKEN_NOT_VALID,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.auth.tokens import TOKEN_ALGORITHM, TokenService
from shared.config import get_settings
from shared.exceptions import ConfigError
from shared.models import AuthenticatedPrincipal, Role

from tests.conftest import TEST_AUDIENCE, TEST_ISSUER, TEST_JWT_SECRET, create_test_token


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(
        secret=TEST_JWT_SECRET,
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
        ttl=timedelta(days=7),
    )


@pytest.fixture
def ada() -> AuthenticatedPrincipal:
    return AuthenticatedPrincipal(cust_id=7, name="Ada", email="ada@x.com", role=Role.CUSTOMER)


class TestIssue:
    def test_claims(self, tokens, ada):
        token = tokens.issue(ada)
        claims = jwt.decode(
            token,
            TEST_JWT_SECRET,
            algorithms=[TOKEN_ALGORITHM],
            audience=TEST_AUDIENCE,
            issuer=TEST_ISSUER,
        )
        assert claims["user"] == {
            "custId": 7,
            "staffId": None,
            "adminId": None,
            "name": "Ada",
            "email": "ada@x.com",
            "role": "customer",
        }
        assert claims["sub"] == "7"
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())
        assert claims["jti"]

    def test_header_algorithm(self, tokens, ada):
        assert jwt.get_unverified_header(tokens.issue(ada))["alg"] == "HS512"

    def test_fresh_jti_per_token(self, tokens, ada):
        first = jwt.decode(tokens.issue(ada), options={"verify_signature": False})
        second = jwt.decode(tokens.issue(ada), options={"verify_signature": False})
        assert first["jti"] != second["jti"]

    def test_empty_secret_rejected(self):
        with pytest.raises(ConfigError):
            TokenService(secret="", issuer="i", audience="a", ttl=timedelta(days=1))

    def test_from_settings(self, ada):
        service = TokenService.from_settings(get_settings())
        assert service.verify(service.issue(ada)) == ada


class TestVerify:
    def test_round_trip(self, tokens, ada):
        assert tokens.verify(tokens.issue(ada)) == ada

    def test_token_signed_elsewhere_with_same_secret(self, tokens):
        principal = tokens.verify(create_test_token(role="staff", principal_id=3))
        assert principal.role is Role.STAFF
        assert principal.staff_id == 3

    def test_legacy_flat_claims(self, tokens):
        """Tokens without a user claim normalize to the same principal shape."""
        principal = tokens.verify(create_test_token(role="admin", principal_id=2, legacy=True))
        assert principal.role is Role.ADMIN
        assert principal.admin_id == 2
        assert principal.principal_id == 2

    def test_missing_token(self, tokens):
        with pytest.raises(MissingTokenError):
            tokens.verify(None)
        with pytest.raises(MissingTokenError):
            tokens.verify("")

    def test_expired(self, tokens):
        with pytest.raises(ExpiredTokenError) as exc_info:
            tokens.verify(create_test_token(expired=True))
        assert exc_info.value.message == TOKEN_NOT_VALID

    def test_expired_at_issue_time(self, tokens, ada):
        issued = datetime.now(timezone.utc) - timedelta(days=8)
        with pytest.raises(ExpiredTokenError):
            tokens.verify(tokens.issue(ada, now=issued))

    def test_wrong_secret(self, tokens):
        with pytest.raises(InvalidTokenError) as exc_info:
            tokens.verify(create_test_token(secret="another-secret-" + "y" * 64))
        assert exc_info.value.message == TOKEN_NOT_VALID

    @pytest.mark.parametrize("algorithm", ["HS256", "HS384"])
    def test_other_algorithms_rejected(self, tokens, algorithm):
        with pytest.raises(InvalidTokenError):
            tokens.verify(create_test_token(algorithm=algorithm))

    def test_unsigned_token_rejected(self, tokens):
        unsigned = jwt.encode(
            {"user": {"role": "admin", "adminId": 1}, "aud": TEST_AUDIENCE, "iss": TEST_ISSUER},
            None,
            algorithm="none",
        )
        with pytest.raises(InvalidTokenError):
            tokens.verify(unsigned)

    def test_wrong_audience(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.verify(create_test_token(extra_claims={"aud": "someone-else"}))

    def test_wrong_issuer(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.verify(create_test_token(extra_claims={"iss": "someone-else"}))

    def test_missing_expiry(self, tokens):
        token = jwt.encode(
            {"user": {"role": "customer", "custId": 1}, "aud": TEST_AUDIENCE, "iss": TEST_ISSUER},
            TEST_JWT_SECRET,
            algorithm="HS512",
        )
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_garbage(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.verify("not.a.token")

    def test_unknown_role(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.verify(create_test_token(role="superuser"))

    def test_no_role(self, tokens):
        """A verified token without a role yields a role-less principal."""
        principal = tokens.verify(create_test_token(role=None))
        assert principal.role is None
