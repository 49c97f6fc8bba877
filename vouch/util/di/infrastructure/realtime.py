"""Realtime infrastructure providers."""

from dishka import Scope, provide

from vouch.adapter.realtime import WebSocketGateway
from vouch.domain.service import RealtimeGateway
from vouch.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider.

    One gateway per process holds every open WebSocket connection.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_websocket_gateway(self) -> WebSocketGateway:
        """Provide WebSocket gateway."""
        return WebSocketGateway()

    @provide(scope=Scope.APP)
    def get_realtime_gateway(self, gateway: WebSocketGateway) -> RealtimeGateway:
        """Provide the gateway behind the realtime port."""
        return gateway
