"""In-memory notification repository for testing."""

from typing import Optional

from vouch.domain.model.notification import Notification
from vouch.domain.repository.notification import NotificationRepository
from vouch.domain.value import InvitationId, NotificationId, UserId
from vouch.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        for notification in self.database.notifications:
            if notification.id == notification_id:
                return notification
        return None

    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        return sorted(
            (
                n
                for n in self.database.notifications
                if n.user_id == user_id and n.status
            ),
            key=lambda n: n.created_at,
            reverse=True,
        )

    async def save(self, notification: Notification) -> Notification:
        for index, existing in enumerate(self.database.notifications):
            if existing.id == notification.id:
                self.database.notifications[index] = notification
                return notification
        self.database.notifications.append(notification)
        return notification

    async def save_many(self, notifications: list[Notification]) -> list[Notification]:
        self.database.notifications.extend(notifications)
        return notifications

    async def exists_for(self, user_id: UserId, type_id: InvitationId) -> bool:
        return any(
            n.user_id == user_id and n.type_id == type_id
            for n in self.database.notifications
        )
