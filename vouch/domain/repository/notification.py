"""Notification repository interface."""

from abc import ABC, abstractmethod

from vouch.domain.model.notification import Notification
from vouch.domain.value import InvitationId, NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Notification | None:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        """Find a user's notifications that have not been removed.

        Args:
            user_id: Recipient

        Returns:
            Notifications, newest first
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        pass

    @abstractmethod
    async def save_many(self, notifications: list[Notification]) -> list[Notification]:
        """Insert several notifications, preserving their order."""
        pass

    @abstractmethod
    async def exists_for(self, user_id: UserId, type_id: InvitationId) -> bool:
        """Whether the user already has a notification about an invitation."""
        pass
