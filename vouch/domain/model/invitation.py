"""Invitation entity.

One invitation record exists per invitee. The ``domain`` discriminator decides
which subject it points at, which limits apply and which templates are used
for its notifications and mails.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from vouch.domain.error import AlreadyVerifiedError
from vouch.domain.model.common import DomainModel
from vouch.domain.value import DomainType, Email, InvitationId, SubjectId, UserId


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - One non-deleted invitation per (scope, email) within a domain, where the
      scope is the subject, or the inviter for connections
    - ``is_verified`` only ever moves from False to True
    - A verified invitation is never modified again
    - Subject invitations are created by the subject owner only
    """

    id: InvitationId
    domain: DomainType
    subject_id: Optional[SubjectId] = None  # None for CONNECTION
    invited_by: UserId
    verifier_id: Optional[UserId] = None  # Resolved account for the email
    email: Email
    first_name: str = ""
    last_name: str = ""
    designation: Optional[str] = None
    comment: Optional[str] = None
    status: bool = True
    is_verified: bool = False
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None

    @property
    def scope_id(self) -> UUID:
        """Key that, together with domain and email, must be unique."""
        return self.subject_id if self.subject_id is not None else self.invited_by

    @property
    def is_registered(self) -> bool:
        """Whether the invited email belongs to a known account."""
        return self.verifier_id is not None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def mark_verified(self, verifier_id: UserId | None = None) -> "Invitation":
        """Return a verified copy of this invitation.

        Raises:
            AlreadyVerifiedError: If the invitation is already verified
        """
        if self.is_verified:
            raise AlreadyVerifiedError()
        return self.model_copy(
            update={
                "is_verified": True,
                "verifier_id": verifier_id or self.verifier_id,
                "updated_at": datetime.now(),
            }
        )

    def soft_delete(self) -> "Invitation":
        return self.model_copy(
            update={"is_deleted": True, "status": False, "updated_at": datetime.now()}
        )
