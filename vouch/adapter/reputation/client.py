"""Reputation service client implementation."""

import httpx
import logfire

from vouch.adapter.error import ReputationTriggerError
from vouch.domain.service.reputation_service import ReputationClient
from vouch.domain.value import UserId


class HttpReputationClient(ReputationClient):
    """Client for the reputation scoring HTTP API."""

    def __init__(self, api_url: str, timeout: float = 5.0) -> None:
        """Initialize reputation client.

        Args:
            api_url: Base URL of the reputation service
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    async def update_reputation_score(self, user_id: UserId) -> None:
        await self._post(f"/users/{user_id}/reputation")

    async def fetch_verifiers_and_update_reputation(self, user_id: UserId) -> None:
        await self._post(f"/users/{user_id}/verifiers/reputation")

    async def _post(self, path: str) -> None:
        """POST to the reputation service.

        Raises:
            ReputationTriggerError: If the request fails or is rejected
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.api_url}{path}", timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Reputation service HTTP error", path=path, error=str(e))
            raise ReputationTriggerError(f"HTTP error calling reputation service: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Reputation service rejected request",
                path=path,
                status_code=response.status_code,
            )
            raise ReputationTriggerError(
                f"Reputation request failed: {response.status_code}"
            )


class MockReputationClient(ReputationClient):
    """Mock reputation client for testing that records the users it was called for."""

    def __init__(self, fail: bool = False) -> None:
        self.score_updates: list[UserId] = []
        self.verifier_updates: list[UserId] = []
        self.fail = fail

    async def update_reputation_score(self, user_id: UserId) -> None:
        if self.fail:
            raise ReputationTriggerError("Mock reputation failure")
        self.score_updates.append(user_id)

    async def fetch_verifiers_and_update_reputation(self, user_id: UserId) -> None:
        if self.fail:
            raise ReputationTriggerError("Mock reputation failure")
        self.verifier_updates.append(user_id)
