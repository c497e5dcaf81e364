"""Unit tests for IdentityResolver and JWTService."""

from datetime import datetime, timedelta

import pytest

from conduit.config import AuthSettings
from conduit.domain.error import InvalidTokenError, MissingTokenError
from conduit.domain.service import IdentityResolver, JWTService
from conduit.util.jwt import create_token

USER_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=AuthSettings(jwt_secret="test-secret"))


@pytest.fixture
def resolver(jwt_service: JWTService) -> IdentityResolver:
    return IdentityResolver(jwt_service=jwt_service)


class TestExtractToken:
    """Tests for IdentityResolver.extract_token()."""

    def test_token_scheme(self):
        assert IdentityResolver.extract_token("Token abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize(
        "header",
        [
            None,
            "",
            "Token",
            "Bearer abc.def.ghi",
            "token abc.def.ghi",
            "Token abc def",
            "Token  abc.def.ghi",
        ],
    )
    def test_anything_else_is_no_token(self, header):
        assert IdentityResolver.extract_token(header) is None


class TestRequire:
    """Tests for IdentityResolver.require()."""

    def test_valid_token(self, resolver, jwt_service):
        token = jwt_service.issue(USER_ID, "jake")

        payload = resolver.require(f"Token {token}")

        assert payload.id == USER_ID
        assert payload.username == "jake"

    def test_missing_token(self, resolver):
        with pytest.raises(MissingTokenError):
            resolver.require(None)

    def test_wrong_scheme_counts_as_missing(self, resolver, jwt_service):
        token = jwt_service.issue(USER_ID, "jake")

        with pytest.raises(MissingTokenError):
            resolver.require(f"Bearer {token}")

    def test_forged_token(self, resolver):
        forged = JWTService(AuthSettings(jwt_secret="other")).issue(USER_ID, "jake")

        with pytest.raises(InvalidTokenError):
            resolver.require(f"Token {forged}")

    def test_expired_token(self, resolver, jwt_service):
        token = jwt_service.issue(
            USER_ID, "jake", issued_at=datetime.now() - timedelta(days=90)
        )

        with pytest.raises(InvalidTokenError):
            resolver.require(f"Token {token}")


class TestOptional:
    """Tests for IdentityResolver.optional()."""

    def test_no_token_is_anonymous(self, resolver):
        assert resolver.optional(None) is None
        assert resolver.optional("Bearer something") is None

    def test_valid_token(self, resolver, jwt_service):
        token = jwt_service.issue(USER_ID, "jake")

        payload = resolver.optional(f"Token {token}")

        assert payload is not None
        assert payload.id == USER_ID

    def test_invalid_token_is_not_anonymous(self, resolver):
        """A bad token is reported, never downgraded to anonymous."""
        with pytest.raises(InvalidTokenError):
            resolver.optional("Token not-a-jwt")

    def test_signed_token_with_non_uuid_id_is_invalid(self, resolver):
        """Ids from another system don't name a user here."""
        settings = AuthSettings(jwt_secret="test-secret")
        token = create_token("5ad9b3c1e4b0a1f2c3d4e5f6", "jake", settings)

        with pytest.raises(InvalidTokenError):
            resolver.optional(f"Token {token}")
