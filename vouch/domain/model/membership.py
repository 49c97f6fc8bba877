"""Membership mapping entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from vouch.domain.model.common import DomainModel
from vouch.domain.value import DomainType, MembershipId, MembershipRole, UserId


class Membership(DomainModel):
    """A user's accepted membership of a project, team or connection list.

    For connections ``subject_id`` is the id of the inviting user.
    """

    id: MembershipId
    domain: DomainType
    subject_id: UUID
    user_id: UserId
    role: MembershipRole = MembershipRole.ACCEPTED
    comment: Optional[str] = None
    status: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
