"""Get verification questions use case."""

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.error import InvalidVerificationIdError
from vouch.domain.service import VerificationQuestion, VerificationWorkflow
from vouch.domain.value import DomainType, InvitationId, UserId


class GetVerificationQuestionsRequest(BaseModel):
    """Questionnaire request from a verifier."""

    domain: DomainType
    verification_id: str
    verifier_id: str


class GetVerificationQuestionsResponse(BaseModel):
    """Questionnaire for the verifier."""

    verification_id: str
    domain: DomainType
    questions: list[VerificationQuestion]


class GetVerificationQuestionsUseCase(BaseUseCase):
    """Use case for loading the questions a verifier answers."""

    def __init__(self, verification_workflow: VerificationWorkflow) -> None:
        self.verification_workflow = verification_workflow

    async def execute(
        self, request: GetVerificationQuestionsRequest
    ) -> GetVerificationQuestionsResponse:
        invitation_id = InvitationId(
            parse_uuid(request.verification_id, InvalidVerificationIdError())
        )
        verifier_id = UserId(parse_uuid(request.verifier_id))

        questions = await self.verification_workflow.get_verification_questions(
            invitation_id, verifier_id, request.domain
        )
        return GetVerificationQuestionsResponse(
            verification_id=str(invitation_id),
            domain=request.domain,
            questions=questions,
        )
