"""Unit tests for configuration checks."""

import pytest

from conduit.config import AuthSettings, Settings
from conduit.util.di.core import DEFAULT_JWT_SECRET, check_auth_settings
from conduit.util.error import ConfigurationError


class TestCheckAuthSettings:
    """Tests for check_auth_settings()."""

    def test_production_rejects_placeholder_secret(self):
        settings = Settings(
            environment="production", auth=AuthSettings(jwt_secret=DEFAULT_JWT_SECRET)
        )

        with pytest.raises(ConfigurationError):
            check_auth_settings(settings)

    def test_production_accepts_real_secret(self):
        settings = Settings(
            environment="production", auth=AuthSettings(jwt_secret="s3cr3t")
        )

        auth = check_auth_settings(settings)

        assert auth.jwt_secret.get_secret_value() == "s3cr3t"

    def test_development_allows_placeholder_secret(self):
        settings = Settings(
            environment="development", auth=AuthSettings(jwt_secret=DEFAULT_JWT_SECRET)
        )

        auth = check_auth_settings(settings)

        assert auth.jwt_algorithm == "HS256"
        assert auth.jwt_expiry_days == 60
