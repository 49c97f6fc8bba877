"""Unit tests for the notification socket route."""

from types import SimpleNamespace
from uuid import uuid4

import pytest

from vouch.adapter.realtime import WebSocketGateway
from vouch.config import AuthSettings, Settings
from vouch.interface.api.routes.realtime import notifications_socket
from vouch.util.jwt import create_token


class StubContainer:
    def __init__(self, *dependencies) -> None:
        self.dependencies = {type(d): d for d in dependencies}

    async def get(self, dependency_type):
        return self.dependencies[dependency_type]


class BrokenSocket:
    """Accepts, then fails on the first read with a non-disconnect error."""

    def __init__(self, container: StubContainer, token: str) -> None:
        self.app = SimpleNamespace(state=SimpleNamespace(dishka_container=container))
        self.cookies = {"auth_token": token}
        self.accepted = False

    async def accept(self) -> None:
        self.accepted = True

    async def receive_text(self) -> str:
        raise RuntimeError("connection reset")

    async def close(self, code: int) -> None:
        pass


class TestNotificationSocketRoute:
    """Tests for room membership over a socket's lifetime."""

    @pytest.mark.asyncio
    async def test_unexpected_error_leaves_room(self):
        # Arrange
        settings = Settings(auth=AuthSettings(jwt_secret="secret"))
        gateway = WebSocketGateway()
        token = create_token(str(uuid4()), "user@example.com", settings.auth)
        websocket = BrokenSocket(StubContainer(settings, gateway), token)

        # Act
        with pytest.raises(RuntimeError):
            await notifications_socket(websocket)

        # Assert
        assert websocket.accepted is True
        assert gateway.rooms == {}
