"""Get verification result use case."""

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.error import InvalidVerificationIdError
from vouch.domain.service import VerificationResultService
from vouch.domain.value import DomainType, InvitationId


class GetVerificationResultRequest(BaseModel):
    """Lookup of an invitation link."""

    domain: DomainType
    verification_id: str


class GetVerificationResultResponse(BaseModel):
    """What the login or signup page needs about the link."""

    is_registered: bool
    type: DomainType
    invited_by: str
    email: str
    verification_id: str
    is_verified: bool


class GetVerificationResultUseCase(BaseUseCase):
    """Use case resolving an invitation link before the user is logged in."""

    def __init__(self, verification_result_service: VerificationResultService) -> None:
        self.verification_result_service = verification_result_service

    async def execute(
        self, request: GetVerificationResultRequest
    ) -> GetVerificationResultResponse:
        """Resolve the link.

        Raises:
            InvalidVerificationIdError: If the id is malformed or unknown
        """
        invitation_id = InvitationId(
            parse_uuid(
                request.verification_id,
                InvalidVerificationIdError("Invalid verification id."),
            )
        )
        result = await self.verification_result_service.get_verification_result(
            invitation_id, request.domain
        )
        return GetVerificationResultResponse(**result.model_dump())
