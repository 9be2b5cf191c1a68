"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from pod.config import FederationSettings, PodSettings, SearchSettings, Settings
from pod.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_pod_settings(self, settings: Settings) -> PodSettings:
        return settings.pod

    @provide
    def provide_federation_settings(self, settings: Settings) -> FederationSettings:
        return settings.federation

    @provide
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        return settings.search
