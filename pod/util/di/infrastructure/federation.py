"""Federation infrastructure providers."""

from dishka import Scope, provide

from pod.adapter.webfinger import WebfingerProfileFetcher
from pod.config import FederationSettings
from pod.domain.service import ProfileFetcher
from pod.util.di.base import ProviderBase
from pod.util.observability import instrument_httpx


class FederationProvider(ProviderBase):
    """Federation component base."""

    __mock_component__ = "federation"


class ProdFederationProvider(FederationProvider):
    """Production federation provider talking WebFinger to remote pods."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_profile_fetcher(
        self, federation_settings: FederationSettings
    ) -> ProfileFetcher:
        """Provide remote profile fetcher."""
        instrument_httpx()
        return WebfingerProfileFetcher(federation_settings)
