"""Configuration providers (never mocked)."""

from dishka import Scope, provide

from virtue.config import AuthSettings, FeedSettings, Settings
from virtue.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections services depend on.

    Settings are read once per container from the environment and ``.env``,
    so tests can set variables before the first resolution.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token verification, provisioning and webhook options."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Page sizes and content limits."""
        return settings.feed
