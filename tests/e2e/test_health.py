"""End-to-end tests for the health endpoint."""

import pytest
from fastapi.testclient import TestClient

from vouch.interface.api.app import create_app
from vouch.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    return TestClient(app_instance)


class TestHealth:
    """End-to-end tests for GET /health."""

    def test_health(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert "git_sha" in data
        assert "environment" in data
