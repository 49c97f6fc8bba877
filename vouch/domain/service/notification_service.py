"""Notification domain service.

Builds notification text from per-domain templates, persists the row and
pushes it to the recipient over the realtime gateway. Dispatch runs after the
triggering business write has committed, and a failed dispatch never fails
that operation.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from vouch.domain.error import NotAuthorizedError, NotificationNotFoundError
from vouch.domain.model.invitation import Invitation
from vouch.domain.model.notification import Notification
from vouch.domain.model.subject import Subject
from vouch.domain.model.user import User
from vouch.domain.repository import NotificationRepository, UnitOfWork
from vouch.domain.value import DomainType, NotificationId, UserId
from vouch.util.best_effort import log_and_continue

from .base import Service


class RealtimeGateway(ABC):
    """Port for pushing events to connected clients."""

    @abstractmethod
    async def emit(self, event: str, payload: dict[str, Any], user_id: UserId) -> None:
        """Send an event to every connection of one user.

        Args:
            event: Event name, ``notify-{user_id}`` for notifications
            payload: JSON-serializable event body
            user_id: Recipient whose room receives the event
        """
        pass


def notification_event(user_id: UserId) -> str:
    return f"notify-{user_id}"


def notification_payload(notification: Notification) -> dict[str, Any]:
    """API-visible shape of a notification."""
    return {
        "id": str(notification.id),
        "userId": str(notification.user_id),
        "notificationType": notification.notification_type.value,
        "typeId": str(notification.type_id) if notification.type_id else None,
        "title": notification.title,
        "message": notification.message,
        "isViewed": notification.is_viewed,
        "status": notification.status,
        "createdAt": notification.created_at.isoformat(),
    }


def invitation_text(
    invitation: Invitation, subject: Subject | None, inviter: User
) -> tuple[str, str]:
    """Title and message telling an invitee about a new invitation."""
    domain = invitation.domain
    if domain.is_verification:
        name = subject.name if subject else ""
        return (
            f"Invitation to verify {domain.label}",
            f"{inviter.first_name} has invited you to verify {name} {domain.label}.",
        )
    if domain == DomainType.CONNECTION:
        return (
            "Invitation to join connections",
            f"{inviter.first_name} has sent you the invitation to join connections",
        )
    name = subject.name if subject else ""
    return (
        f"Invitation to join {domain.label}",
        f"{inviter.first_name} has sent you the invitation to join {name} {domain.label}",
    )


class NotificationService(Service):
    """Domain service for notification dispatch and the notification inbox."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        realtime_gateway: RealtimeGateway,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            realtime_gateway: Push channel to connected clients
            unit_of_work: Transaction boundary for notification writes
        """
        self.notification_repository = notification_repository
        self.realtime_gateway = realtime_gateway
        self.unit_of_work = unit_of_work

    async def send_invitation_notification(
        self, invitation: Invitation, subject: Subject | None, inviter: User
    ) -> Notification | None:
        """Tell a registered invitee about a new invitation.

        Unregistered invitees get nothing here; they are reached by mail and
        receive the notification on registration.

        Returns:
            The stored notification, or None if nothing was sent
        """
        if invitation.verifier_id is None:
            return None
        title, message = invitation_text(invitation, subject, inviter)
        return await self._dispatch(
            recipient_id=invitation.verifier_id,
            invitation=invitation,
            title=title,
            message=message,
        )

    async def send_verified_notification(
        self, invitation: Invitation, subject: Subject, verifier: User
    ) -> Notification | None:
        """Tell the subject owner that a verifier confirmed the subject."""
        label = invitation.domain.label
        return await self._dispatch(
            recipient_id=invitation.invited_by,
            invitation=invitation,
            title=f"{subject.name} {label} verified",
            message=f"{verifier.first_name} has verified your {subject.name} {label}.",
        )

    async def send_failed_notification(
        self, invitation: Invitation, subject: Subject, verifier: User
    ) -> Notification | None:
        """Tell the subject owner that a verifier reported incorrect details."""
        label = invitation.domain.label
        return await self._dispatch(
            recipient_id=invitation.invited_by,
            invitation=invitation,
            title=f"{subject.name} {label} verification failed",
            message=(
                f"{verifier.first_name} has reported that your {subject.name} "
                f"{label} information is incorrect."
            ),
        )

    async def send_accepted_notification(
        self, invitation: Invitation, subject: Subject | None, member: User
    ) -> Notification | None:
        """Tell the inviter that a membership invitation was accepted."""
        if invitation.domain == DomainType.CONNECTION or subject is None:
            title = "Connection invitation accepted"
            message = f"{member.first_name} has accepted your connection invitation."
        else:
            title = f"{subject.name} invitation accepted"
            message = f"{member.first_name} has accepted your {subject.name} invitation."
        return await self._dispatch(
            recipient_id=invitation.invited_by,
            invitation=invitation,
            title=title,
            message=message,
        )

    async def save_backfill(self, notifications: list[Notification]) -> list[Notification]:
        """Insert historical notifications without pushing them.

        Args:
            notifications: Notifications in the order they should be stored

        Returns:
            The stored notifications
        """
        with logfire.span("notification_service.save_backfill", count=len(notifications)):
            if not notifications:
                return []
            async with self.unit_of_work.transaction():
                saved = await self.notification_repository.save_many(notifications)
            logfire.info("Notifications backfilled", count=len(saved))
            return saved

    async def list_notifications(self, user_id: UserId) -> list[Notification]:
        with logfire.span("notification_service.list_notifications", user_id=str(user_id)):
            return await self.notification_repository.find_by_user(user_id)

    async def update_notification(
        self,
        user_id: UserId,
        notification_id: NotificationId,
        viewed: bool | None = None,
        remove: bool | None = None,
    ) -> Notification:
        """Mark a notification viewed and/or removed.

        Args:
            user_id: Caller, who must be the recipient
            notification_id: Notification to update
            viewed: New viewed flag, unchanged if None
            remove: Remove the notification from the inbox when True

        Returns:
            Updated notification

        Raises:
            NotificationNotFoundError: If the notification does not exist
            NotAuthorizedError: If the caller is not the recipient
        """
        with logfire.span(
            "notification_service.update_notification",
            user_id=str(user_id),
            notification_id=str(notification_id),
        ):
            notification = await self.notification_repository.find_by_id(notification_id)
            if not notification:
                raise NotificationNotFoundError(str(notification_id))
            if notification.user_id != user_id:
                raise NotAuthorizedError(
                    "notification", str(notification_id), str(user_id)
                )

            update: dict[str, Any] = {}
            if viewed is not None:
                update["is_viewed"] = viewed
            if remove:
                update["status"] = False
            if not update:
                return notification

            updated = notification.model_copy(update=update)
            async with self.unit_of_work.transaction():
                saved = await self.notification_repository.save(updated)
            logfire.info(
                "Notification updated",
                notification_id=str(notification_id),
                is_viewed=saved.is_viewed,
                status=saved.status,
            )
            return saved

    async def _dispatch(
        self,
        recipient_id: UserId,
        invitation: Invitation,
        title: str,
        message: str,
    ) -> Notification | None:
        """Persist a notification, then push it to the recipient's room.

        Returns:
            The stored notification, or None if persisting failed
        """
        notification = Notification(
            id=NotificationId(uuid4()),
            user_id=recipient_id,
            notification_type=invitation.domain,
            type_id=invitation.id,
            title=title,
            message=message,
            created_at=datetime.now(),
        )
        saved: Notification | None = None

        with logfire.span(
            "notification_service.dispatch",
            recipient_id=str(recipient_id),
            invitation_id=str(invitation.id),
            domain=invitation.domain.value,
        ):
            async with log_and_continue(
                "notification.persist", invitation_id=str(invitation.id)
            ):
                async with self.unit_of_work.transaction():
                    saved = await self.notification_repository.save(notification)
            if saved is None:
                return None

            async with log_and_continue(
                "notification.push", notification_id=str(saved.id)
            ):
                await self.realtime_gateway.emit(
                    notification_event(recipient_id),
                    notification_payload(saved),
                    recipient_id,
                )
            logfire.info(
                "Notification dispatched",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )
            return saved
