"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gate.config import AuthSettings, FacebookSettings, Settings, StorageSettings
from gate.util.di.base import ProviderBase


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
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_facebook_settings(self, settings: Settings) -> FacebookSettings:
        """Provide Facebook settings."""
        return settings.facebook

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide file storage settings."""
        return settings.storage
