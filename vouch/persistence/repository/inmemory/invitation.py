"""In-memory invitation repository for testing."""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from vouch.domain.model.invitation import Invitation
from vouch.domain.repository.invitation import InvitationRepository
from vouch.domain.value import DomainType, Email, InvitationId, UserId
from vouch.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        for invitation in self.database.invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_active_by_scope(
        self, domain: DomainType, scope_id: UUID
    ) -> list[Invitation]:
        return sorted(
            (
                i
                for i in self.database.invitations
                if i.domain == domain and i.scope_id == scope_id and not i.is_deleted
            ),
            key=lambda i: i.created_at,
        )

    async def find_open_by_email(
        self, domain: DomainType, email: Email
    ) -> list[Invitation]:
        return sorted(
            (
                i
                for i in self.database.invitations
                if i.domain == domain
                and i.email == email
                and i.status
                and not i.is_deleted
            ),
            key=lambda i: i.created_at,
        )

    async def attach_verifier_by_email(
        self, domain: DomainType, email: Email, user_id: UserId
    ) -> int:
        updated = 0
        for index, invitation in enumerate(self.database.invitations):
            if (
                invitation.domain == domain
                and invitation.email == email
                and invitation.verifier_id is None
                and not invitation.is_deleted
            ):
                self.database.invitations[index] = invitation.model_copy(
                    update={"verifier_id": user_id}
                )
                updated += 1
        return updated

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If an active invitation exists for the same
                domain, scope and email
        """
        for index, existing in enumerate(self.database.invitations):
            if existing.id == invitation.id:
                self.database.invitations[index] = invitation
                return invitation

        if not invitation.is_deleted and self._has_active_duplicate(invitation):
            raise IntegrityError("Duplicate active invitation", None, Exception())

        self.database.invitations.append(invitation)
        return invitation

    async def save_many(self, invitations: list[Invitation]) -> list[Invitation]:
        for invitation in invitations:
            await self.save(invitation)
        return invitations

    def _has_active_duplicate(self, invitation: Invitation) -> bool:
        return any(
            i.domain == invitation.domain
            and i.scope_id == invitation.scope_id
            and i.email == invitation.email
            and not i.is_deleted
            for i in self.database.invitations
        )
