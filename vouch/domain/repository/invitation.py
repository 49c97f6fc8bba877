"""Invitation repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from vouch.domain.model.invitation import Invitation
from vouch.domain.value import DomainType, Email, InvitationId, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    A single store holds the invitations of every domain; the ``domain``
    argument scopes each query. Implementations must reject a second
    non-deleted invitation for the same (domain, scope, email) with
    ``sqlalchemy.exc.IntegrityError``.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_scope(
        self, domain: DomainType, scope_id: UUID
    ) -> list[Invitation]:
        """Find all non-deleted invitations for a subject, or for an inviter.

        Args:
            domain: Invitation domain
            scope_id: Subject ID, or inviter ID for connections

        Returns:
            Matching invitations, oldest first
        """
        pass

    @abstractmethod
    async def find_open_by_email(
        self, domain: DomainType, email: Email
    ) -> list[Invitation]:
        """Find active, non-deleted invitations addressed to an email.

        Args:
            domain: Invitation domain
            email: Invited email

        Returns:
            Matching invitations, oldest first
        """
        pass

    @abstractmethod
    async def attach_verifier_by_email(
        self, domain: DomainType, email: Email, user_id: UserId
    ) -> int:
        """Point the live, unclaimed invitations to an email at a user account.

        Deleted invitations and ones that already have a verifier are left
        untouched.

        Args:
            domain: Invitation domain
            email: Invited email
            user_id: Newly registered user

        Returns:
            Number of invitations updated
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: Invitation to save

        Returns:
            The saved invitation

        Raises:
            IntegrityError: If an active invitation already exists for the
                same domain, scope and email
        """
        pass

    @abstractmethod
    async def save_many(self, invitations: list[Invitation]) -> list[Invitation]:
        """Insert several new invitations."""
        pass
