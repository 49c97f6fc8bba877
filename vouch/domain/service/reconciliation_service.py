"""Reconciliation domain service.

Runs after a user registers. Invitations sent to the new user's email before
the account existed are attached to it, and the invitations still open are
backfilled into the user's notification inbox. Running it again adds nothing.
"""

from uuid import uuid4

import logfire

from vouch.domain.model.invitation import Invitation
from vouch.domain.model.notification import Notification
from vouch.domain.model.user import User
from vouch.domain.repository import (
    InvitationRepository,
    NotificationRepository,
    UnitOfWork,
    UserRepository,
)
from vouch.domain.value import DomainType, NotificationId
from vouch.util.best_effort import log_and_continue

from .base import Service
from .notification_service import NotificationService

# Title and the noun used in the message, per domain
BACKFILL_TEMPLATES: dict[DomainType, tuple[str, str]] = {
    DomainType.SKILL: ("Invitation to verify skill", "skills"),
    DomainType.CLIENT_PROJECT: ("Invitation to verify project", "project"),
    DomainType.EMPLOYMENT: ("Invitation to verify job experience", "employment info"),
    DomainType.PROJECT: ("Invitation to join project", "project"),
    DomainType.TEAM: ("Invitation to join team", "team"),
    DomainType.CONNECTION: ("Invitation to join connection", "connection"),
}


class ReconciliationService(Service):
    """Attach pre-registration invitations to a new account."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        user_repository: UserRepository,
        notification_repository: NotificationRepository,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.invitation_repository = invitation_repository
        self.user_repository = user_repository
        self.notification_repository = notification_repository
        self.notification_service = notification_service
        self.unit_of_work = unit_of_work

    async def update_user_info_in_invites(self, user: User) -> int:
        """Point every invitation addressed to the user's email at the user.

        Each domain is updated in its own transaction; a failure in one is
        logged and does not stop the others.

        Returns:
            Number of invitations updated
        """
        with logfire.span(
            "reconciliation_service.update_user_info_in_invites", user_id=str(user.id)
        ):
            updated = 0
            for domain in DomainType:
                async with log_and_continue(
                    "reconciliation.attach_verifier",
                    domain=domain.value,
                    user_id=str(user.id),
                ):
                    async with self.unit_of_work.transaction():
                        updated += await self.invitation_repository.attach_verifier_by_email(
                            domain, user.email, user.id
                        )
            logfire.info("Invitations attached to user", user_id=str(user.id), count=updated)
            return updated

    async def save_invites_as_notifications(self, user: User) -> list[Notification]:
        """Backfill notifications for the open invitations of a new user.

        Accepted connection requests are left out, as are invitations the
        user already has a notification for, so running the backfill again
        adds nothing. Each domain is read in its own transaction; a failure in
        one is logged and the others still backfill.

        Notifications keep the creation time of their invitation and are
        stored oldest first.

        Returns:
            The stored notifications, oldest first
        """
        with logfire.span(
            "reconciliation_service.save_invites_as_notifications",
            user_id=str(user.id),
        ):
            notifications: list[Notification] = []
            for domain in DomainType:
                async with log_and_continue(
                    "reconciliation.collect_invites",
                    domain=domain.value,
                    user_id=str(user.id),
                ):
                    async with self.unit_of_work.transaction():
                        notifications.extend(await self._collect_backfill(domain, user))
            notifications.sort(key=lambda n: n.created_at)

            saved: list[Notification] = []
            async with log_and_continue(
                "reconciliation.save_notifications", user_id=str(user.id)
            ):
                saved = await self.notification_service.save_backfill(notifications)
            return saved

    async def reconcile(self, user: User) -> list[Notification]:
        """Run both reconciliation steps for a newly registered user."""
        await self.update_user_info_in_invites(user)
        return await self.save_invites_as_notifications(user)

    async def _backfill_notification(
        self, user: User, invitation: Invitation
    ) -> Notification:
        title, noun = BACKFILL_TEMPLATES[invitation.domain]
        inviter = await self.user_repository.find_by_id(invitation.invited_by)
        name = inviter.first_name if inviter and inviter.first_name else "Someone"
        if invitation.domain.is_verification:
            message = f"{name} has invited you to verify their {noun}"
        else:
            message = f"{name} has invited you to join the {noun}"
        return Notification(
            id=NotificationId(uuid4()),
            user_id=user.id,
            notification_type=invitation.domain,
            type_id=invitation.id,
            title=title,
            message=message,
            created_at=invitation.created_at,
        )

    async def _collect_backfill(
        self, domain: DomainType, user: User
    ) -> list[Notification]:
        found = await self.invitation_repository.find_open_by_email(domain, user.email)
        notifications = []
        for invitation in found:
            if invitation.domain == DomainType.CONNECTION and invitation.is_verified:
                continue
            if await self.notification_repository.exists_for(user.id, invitation.id):
                continue
            notifications.append(await self._backfill_notification(user, invitation))
        return notifications
