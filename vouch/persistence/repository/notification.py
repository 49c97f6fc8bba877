"""PostgreSQL implementation of Notification repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vouch.domain.model import Notification
from vouch.domain.repository import NotificationRepository
from vouch.domain.value import InvitationId, NotificationId, UserId
from vouch.persistence.mappers import notification_to_dict, row_to_notification
from vouch.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        stmt = (
            select(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.status.is_(True),
                )
            )
            .order_by(notifications_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def save(self, notification: Notification) -> Notification:
        notification_dict = notification_to_dict(notification)

        existing = await self.find_by_id(notification.id)

        if existing:
            stmt = (
                update(notifications_table)
                .where(notifications_table.c.id == notification.id)
                .values(**notification_dict)
            )
        else:
            stmt = insert(notifications_table).values(**notification_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return notification

    async def save_many(self, notifications: list[Notification]) -> list[Notification]:
        if not notifications:
            return []
        await self.session.execute(
            insert(notifications_table),
            [notification_to_dict(n) for n in notifications],
        )
        await self.session.flush()
        return notifications

    async def exists_for(self, user_id: UserId, type_id: InvitationId) -> bool:
        stmt = select(notifications_table.c.id).where(
            and_(
                notifications_table.c.user_id == user_id,
                notifications_table.c.type_id == type_id,
            )
        )
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None
