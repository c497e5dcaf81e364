"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from conduit.config import AuthSettings, Settings
from conduit.util.di.base import ProviderBase
from conduit.util.error import ConfigurationError

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_auth_settings(settings: Settings) -> AuthSettings:
    """Refuse to sign tokens with the placeholder secret in production.

    Args:
        settings: Application settings

    Returns:
        The auth settings

    Raises:
        ConfigurationError: If production runs with the placeholder secret
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret.get_secret_value() == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    return settings.auth


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return check_auth_settings(settings)
