"""PostgreSQL implementation of Membership repository."""

from uuid import UUID

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from vouch.domain.model import Membership
from vouch.domain.repository import MembershipRepository
from vouch.domain.value import DomainType, UserId
from vouch.persistence.mappers import membership_to_dict
from vouch.persistence.tables import memberships_table


class PostgresMembershipRepository(MembershipRepository):
    """PostgreSQL implementation of MembershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, domain: DomainType, subject_id: UUID, user_id: UserId) -> bool:
        stmt = select(memberships_table.c.id).where(
            and_(
                memberships_table.c.domain == domain.value,
                memberships_table.c.subject_id == subject_id,
                memberships_table.c.user_id == user_id,
                memberships_table.c.status.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, membership: Membership) -> Membership:
        """Insert a membership.

        Raises:
            IntegrityError: If uq_memberships_member is violated
        """
        await self.session.execute(
            insert(memberships_table).values(**membership_to_dict(membership))
        )
        await self.session.flush()
        return membership
