"""Update notification use case."""

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.application.usecase.notification.list_notifications import (
    NotificationItem,
)
from vouch.domain.error import NotificationNotFoundError
from vouch.domain.service import NotificationService
from vouch.domain.value import NotificationId, UserId


class UpdateNotificationRequest(BaseModel):
    """Update notification request."""

    notification_id: str
    user_id: str
    viewed: bool | None = None
    remove: bool | None = None


class UpdateNotificationResponse(BaseModel):
    """Updated notification."""

    notification: NotificationItem
    removed: bool


class UpdateNotificationUseCase(BaseUseCase):
    """Use case for marking a notification viewed or removing it."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: UpdateNotificationRequest
    ) -> UpdateNotificationResponse:
        notification_id = NotificationId(
            parse_uuid(
                request.notification_id,
                NotificationNotFoundError(request.notification_id),
            )
        )
        user_id = UserId(parse_uuid(request.user_id))

        notification = await self.notification_service.update_notification(
            user_id, notification_id, viewed=request.viewed, remove=request.remove
        )
        return UpdateNotificationResponse(
            notification=NotificationItem.from_notification(notification),
            removed=not notification.status,
        )
