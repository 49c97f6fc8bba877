"""List notifications use case."""

from datetime import datetime

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.model.notification import Notification
from vouch.domain.service import NotificationService
from vouch.domain.value import DomainType, UserId


class NotificationItem(BaseModel):
    """Notification as shown in the inbox."""

    id: str
    notification_type: DomainType
    type_id: str | None
    title: str
    message: str
    is_viewed: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            id=str(notification.id),
            notification_type=notification.notification_type,
            type_id=str(notification.type_id) if notification.type_id else None,
            title=notification.title,
            message=notification.message,
            is_viewed=notification.is_viewed,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str


class ListNotificationsResponse(BaseModel):
    """Caller's inbox, newest first."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for reading the caller's notification inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user_id = UserId(parse_uuid(request.user_id))
        notifications = await self.notification_service.list_notifications(user_id)
        return ListNotificationsResponse(
            notifications=[
                NotificationItem.from_notification(n) for n in notifications
            ],
            unread_count=sum(1 for n in notifications if not n.is_viewed),
        )
