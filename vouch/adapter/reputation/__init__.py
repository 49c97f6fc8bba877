"""Reputation service adapter."""

from .client import HttpReputationClient, MockReputationClient

__all__ = ["HttpReputationClient", "MockReputationClient"]
