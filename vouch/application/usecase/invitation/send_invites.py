"""Send invitations use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.service import InviteeDetails, VerificationWorkflow
from vouch.domain.value import DomainType, SubjectId, UserId


class InviteeInfo(BaseModel):
    """Info for a single invitee."""

    email: str
    first_name: str = ""
    last_name: str = ""
    designation: str | None = None
    comment: str | None = None


class SendInvitesRequest(BaseModel):
    """Request to send invitations."""

    domain: DomainType
    inviter_id: str
    subject_id: str | None = None  # Not used for connections
    invitees: list[InviteeInfo] = Field(min_length=1)


class InvitationItem(BaseModel):
    """Invitation item in response."""

    invitation_id: str
    domain: DomainType
    subject_id: str | None
    email: str
    first_name: str
    last_name: str
    is_registered: bool
    verification_url: str
    notification_id: str | None
    created_at: datetime


class SendInvitesResponse(BaseModel):
    """Response after sending invitations."""

    invitations: list[InvitationItem]


class SendInvitesUseCase(BaseUseCase):
    """Use case for inviting people to verify or join a subject."""

    def __init__(self, verification_workflow: VerificationWorkflow) -> None:
        """Initialize use case.

        Args:
            verification_workflow: Verification workflow domain service
        """
        self.verification_workflow = verification_workflow

    async def execute(self, request: SendInvitesRequest) -> SendInvitesResponse:
        """Execute send invitations flow.

        Args:
            request: Send invitations request

        Returns:
            Response with the stored invitations and their links

        Raises:
            DomainError: If any invitation rule is violated
        """
        inviter_id = UserId(parse_uuid(request.inviter_id))
        subject_id = (
            SubjectId(parse_uuid(request.subject_id)) if request.subject_id else None
        )

        sent = await self.verification_workflow.send_invite(
            domain=request.domain,
            subject_id=subject_id,
            inviter_id=inviter_id,
            invitees=[
                InviteeDetails(**invitee.model_dump()) for invitee in request.invitees
            ],
        )

        return SendInvitesResponse(
            invitations=[
                InvitationItem(
                    invitation_id=str(item.invitation.id),
                    domain=item.invitation.domain,
                    subject_id=(
                        str(item.invitation.subject_id)
                        if item.invitation.subject_id
                        else None
                    ),
                    email=item.invitation.email.root,
                    first_name=item.invitation.first_name,
                    last_name=item.invitation.last_name,
                    is_registered=item.invitation.is_registered,
                    verification_url=item.verification_url,
                    notification_id=(
                        str(item.notification_id) if item.notification_id else None
                    ),
                    created_at=item.invitation.created_at,
                )
                for item in sent
            ]
        )
