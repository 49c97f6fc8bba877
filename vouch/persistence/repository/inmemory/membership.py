"""In-memory membership repository for testing."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from vouch.domain.model.membership import Membership
from vouch.domain.repository.membership import MembershipRepository
from vouch.domain.value import DomainType, UserId
from vouch.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryMembershipRepository(MembershipRepository):
    """In-memory implementation of MembershipRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def exists(self, domain: DomainType, subject_id: UUID, user_id: UserId) -> bool:
        return any(
            m.domain == domain
            and m.subject_id == subject_id
            and m.user_id == user_id
            and m.status
            for m in self.database.memberships
        )

    async def save(self, membership: Membership) -> Membership:
        """Save a membership.

        Raises:
            IntegrityError: If the user already holds this membership
        """
        if await self.exists(membership.domain, membership.subject_id, membership.user_id):
            raise IntegrityError("Duplicate membership", None, Exception())
        self.database.memberships.append(membership)
        return membership
