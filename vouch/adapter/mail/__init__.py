"""Transactional mail adapter."""

from .client import HttpMailClient, MockMailClient, SentMail

__all__ = ["HttpMailClient", "MockMailClient", "SentMail"]
