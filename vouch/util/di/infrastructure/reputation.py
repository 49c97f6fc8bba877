"""Reputation infrastructure providers."""

from dishka import Scope, provide

from vouch.adapter.reputation import HttpReputationClient
from vouch.config import Settings
from vouch.domain.service import ReputationClient
from vouch.util.di.base import ProviderBase


class ReputationProvider(ProviderBase):
    """Reputation component base."""

    __mock_component__ = "reputation"


class ProdReputationProvider(ReputationProvider):
    """Production reputation provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_reputation_client(self, settings: Settings) -> ReputationClient:
        """Provide reputation service client."""
        return HttpReputationClient(
            api_url=settings.reputation.api_url,
            timeout=settings.reputation.timeout_seconds,
        )
