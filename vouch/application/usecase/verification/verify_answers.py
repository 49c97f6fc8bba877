"""Verify answers use case."""

from typing import Any

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.error import InvalidVerificationIdError
from vouch.domain.service import VerificationWorkflow
from vouch.domain.value import DomainType, InvitationId, UserId, VerificationOutcome


class VerifyAnswersRequest(BaseModel):
    """Answers submitted by a verifier."""

    domain: DomainType
    verification_id: str
    verifier_id: str
    answers: dict[str, Any]  # Keyed by question field name


class VerifyAnswersResponse(BaseModel):
    """Verification outcome."""

    verification_id: str
    domain: DomainType
    outcome: VerificationOutcome
    is_verified: bool


class VerifyAnswersUseCase(BaseUseCase):
    """Use case for submitting a verification questionnaire."""

    def __init__(self, verification_workflow: VerificationWorkflow) -> None:
        self.verification_workflow = verification_workflow

    async def execute(self, request: VerifyAnswersRequest) -> VerifyAnswersResponse:
        """Execute verify answers flow.

        A failed verification is a normal response with outcome ``FAILED``;
        only invalid requests raise.

        Raises:
            InvalidVerificationIdError: If the invitation is not the caller's
            AlreadyVerifiedError: If it was verified before
            InvalidAnswerError: If an answer does not match its options
        """
        invitation_id = InvitationId(
            parse_uuid(request.verification_id, InvalidVerificationIdError())
        )
        verifier_id = UserId(parse_uuid(request.verifier_id))

        attempt = await self.verification_workflow.verify_answers(
            invitation_id, verifier_id, request.answers, request.domain
        )
        return VerifyAnswersResponse(
            verification_id=str(attempt.invitation.id),
            domain=attempt.invitation.domain,
            outcome=attempt.outcome,
            is_verified=attempt.invitation.is_verified,
        )
