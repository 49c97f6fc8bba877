"""Accept invitation use case."""

from datetime import datetime

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.error import InvitationNotFoundError
from vouch.domain.service import VerificationWorkflow
from vouch.domain.value import DomainType, InvitationId, MembershipRole, UserId


class AcceptInviteRequest(BaseModel):
    """Accept invitation request."""

    invitation_id: str
    user_id: str


class AcceptInviteResponse(BaseModel):
    """Accept invitation response."""

    membership_id: str
    domain: DomainType
    subject_id: str
    role: MembershipRole
    created_at: datetime


class AcceptInviteUseCase(BaseUseCase):
    """Use case for accepting a project, team or connection invitation."""

    def __init__(self, verification_workflow: VerificationWorkflow) -> None:
        self.verification_workflow = verification_workflow

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        invitation_id = InvitationId(
            parse_uuid(
                request.invitation_id, InvitationNotFoundError(request.invitation_id)
            )
        )
        user_id = UserId(parse_uuid(request.user_id))

        membership = await self.verification_workflow.accept_invite(
            invitation_id, user_id
        )

        return AcceptInviteResponse(
            membership_id=str(membership.id),
            domain=membership.domain,
            subject_id=str(membership.subject_id),
            role=membership.role,
            created_at=membership.created_at,
        )
