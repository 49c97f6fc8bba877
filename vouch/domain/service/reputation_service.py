"""Reputation trigger service."""

from abc import ABC, abstractmethod

import logfire

from vouch.domain.value import UserId
from vouch.util.best_effort import log_and_continue

from .base import Service


class ReputationClient(ABC):
    """Port for the reputation scoring service.

    The score itself is computed elsewhere; this engine only tells the scorer
    when a user's inputs changed.
    """

    @abstractmethod
    async def update_reputation_score(self, user_id: UserId) -> None:
        """Recalculate one user's reputation score."""
        pass

    @abstractmethod
    async def fetch_verifiers_and_update_reputation(self, user_id: UserId) -> None:
        """Recalculate the scores of everyone who verified a user."""
        pass


class ReputationService(Service):
    """Fire-and-forget wrapper around the reputation client."""

    def __init__(self, reputation_client: ReputationClient) -> None:
        self.reputation_client = reputation_client

    async def trigger_update(self, user_id: UserId) -> None:
        """Request a score update, logging and swallowing any failure."""
        with logfire.span("reputation_service.trigger_update", user_id=str(user_id)):
            async with log_and_continue(
                "reputation.update_reputation_score", user_id=str(user_id)
            ):
                await self.reputation_client.update_reputation_score(user_id)

    async def trigger_verifier_update(self, user_id: UserId) -> None:
        """Request score updates for a user's verifiers, swallowing failures."""
        with logfire.span(
            "reputation_service.trigger_verifier_update", user_id=str(user_id)
        ):
            async with log_and_continue(
                "reputation.fetch_verifiers_and_update_reputation",
                user_id=str(user_id),
            ):
                await self.reputation_client.fetch_verifiers_and_update_reputation(
                    user_id
                )
