"""Notification use cases."""

from vouch.application.usecase.notification.list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from vouch.application.usecase.notification.update_notification import (
    UpdateNotificationRequest,
    UpdateNotificationResponse,
    UpdateNotificationUseCase,
)

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "NotificationItem",
    "UpdateNotificationRequest",
    "UpdateNotificationResponse",
    "UpdateNotificationUseCase",
]
