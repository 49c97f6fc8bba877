"""Membership repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from vouch.domain.model.membership import Membership
from vouch.domain.value import DomainType, UserId


class MembershipRepository(ABC):
    """Repository for Membership entity."""

    @abstractmethod
    async def exists(self, domain: DomainType, subject_id: UUID, user_id: UserId) -> bool:
        """Check whether a user already holds a membership.

        Args:
            domain: PROJECT, TEAM or CONNECTION
            subject_id: Project or team ID, or the inviting user for connections
            user_id: Member

        Returns:
            True if an active membership exists, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, membership: Membership) -> Membership:
        """Save a membership.

        Raises:
            IntegrityError: If the membership already exists
        """
        pass
