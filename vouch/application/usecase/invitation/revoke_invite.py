"""Revoke invitation use case."""

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.error import InvitationNotFoundError
from vouch.domain.service import VerificationWorkflow
from vouch.domain.value import InvitationId, UserId


class RevokeInviteRequest(BaseModel):
    """Revoke invitation request."""

    invitation_id: str
    user_id: str


class RevokeInviteResponse(BaseModel):
    """Revoke invitation response."""

    success: bool
    invitation_id: str


class RevokeInviteUseCase(BaseUseCase):
    """Use case for withdrawing a pending connection request."""

    def __init__(self, verification_workflow: VerificationWorkflow) -> None:
        self.verification_workflow = verification_workflow

    async def execute(self, request: RevokeInviteRequest) -> RevokeInviteResponse:
        invitation_id = InvitationId(
            parse_uuid(
                request.invitation_id, InvitationNotFoundError(request.invitation_id)
            )
        )
        user_id = UserId(parse_uuid(request.user_id))

        revoked = await self.verification_workflow.revoke_invite(invitation_id, user_id)

        return RevokeInviteResponse(success=True, invitation_id=str(revoked.id))
