"""Container fixtures shared by unit and integration tests."""

import pytest_asyncio

from vouch.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Build a fixture yielding a request-scoped container.

    Each test gets a fresh container, so the in-memory store and the
    recording mocks start empty.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_inbox(unit_env):
            service = await unit_env.get(NotificationService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
