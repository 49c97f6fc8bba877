"""PostgreSQL implementation of Invitation repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vouch.domain.model import Invitation
from vouch.domain.repository import InvitationRepository
from vouch.domain.value import DomainType, Email, InvitationId, UserId
from vouch.persistence.mappers import invitation_to_dict, row_to_invitation
from vouch.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_active_by_scope(
        self, domain: DomainType, scope_id: UUID
    ) -> list[Invitation]:
        """Find non-deleted invitations for a subject or inviter.

        Uses idx_invitations_scope.
        """
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.domain == domain.value,
                    invitations_table.c.scope_id == scope_id,
                    invitations_table.c.is_deleted.is_(False),
                )
            )
            .order_by(invitations_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def find_open_by_email(
        self, domain: DomainType, email: Email
    ) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.domain == domain.value,
                    invitations_table.c.email == email.root,
                    invitations_table.c.status.is_(True),
                    invitations_table.c.is_deleted.is_(False),
                )
            )
            .order_by(invitations_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def attach_verifier_by_email(
        self, domain: DomainType, email: Email, user_id: UserId
    ) -> int:
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.domain == domain.value,
                    invitations_table.c.email == email.root,
                    invitations_table.c.verifier_id.is_(None),
                    invitations_table.c.is_deleted.is_(False),
                )
            )
            .values(verifier_id=user_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invitation

    async def save_many(self, invitations: list[Invitation]) -> list[Invitation]:
        if not invitations:
            return []
        await self.session.execute(
            insert(invitations_table),
            [invitation_to_dict(invitation) for invitation in invitations],
        )
        await self.session.flush()
        return invitations
