"""End-to-end tests for the notification socket."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from vouch.config import Settings
from vouch.interface.api.app import create_app
from vouch.util.di.container import setup_di
from vouch.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    return TestClient(app_instance)


class TestNotificationSocket:
    """Tests for WS /ws/notifications."""

    def test_missing_cookie_closes_socket(self, client):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws/notifications"):
                pass

        assert exc_info.value.code == 1008

    def test_invalid_token_closes_socket(self, client):
        client.cookies.set("auth_token", "invalid-token")

        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws/notifications"):
                pass

        assert exc_info.value.code == 1008

    def test_valid_token_accepted(self, client):
        token = create_token(str(uuid4()), "user@example.com", Settings().auth)
        client.cookies.set("auth_token", token)

        with client.websocket_connect("/ws/notifications") as websocket:
            websocket.send_text("ping")
