"""Verification result domain service."""

import logfire
from pydantic import BaseModel

from vouch.domain.error import InvalidVerificationIdError
from vouch.domain.repository import InvitationRepository
from vouch.domain.value import DomainType, InvitationId

from .base import Service


class VerificationResult(BaseModel):
    """What the signup/login flow needs to know about an invitation."""

    is_registered: bool
    type: DomainType
    invited_by: str
    email: str
    verification_id: str
    is_verified: bool


class VerificationResultService(Service):
    """Resolves an invitation link for the registration and login flow."""

    def __init__(self, invitation_repository: InvitationRepository) -> None:
        self.invitation_repository = invitation_repository

    async def get_verification_result(
        self, invitation_id: InvitationId, domain: DomainType
    ) -> VerificationResult:
        """Describe an invitation for the client deciding between login and signup.

        ``is_registered`` reports whether the counterpart (the connection
        invitee, or the verifier in other domains) already has an account.

        Args:
            invitation_id: Invitation from the link
            domain: Domain from the link

        Returns:
            Verification result

        Raises:
            InvalidVerificationIdError: If no live invitation of that domain exists
        """
        with logfire.span(
            "verification_result_service.get_verification_result",
            invitation_id=str(invitation_id),
            domain=domain.value,
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if not invitation or invitation.is_deleted or invitation.domain != domain:
                logfire.warn(
                    "Verification result for unknown invitation",
                    invitation_id=str(invitation_id),
                )
                raise InvalidVerificationIdError("Invalid verification id.")

            return VerificationResult(
                is_registered=invitation.is_registered,
                type=invitation.domain,
                invited_by=str(invitation.invited_by),
                email=invitation.email.root,
                verification_id=str(invitation.id),
                is_verified=invitation.is_verified,
            )
