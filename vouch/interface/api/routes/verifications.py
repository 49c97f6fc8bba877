"""Verification routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from vouch.application.usecase.verification import (
    GetVerificationQuestionsRequest,
    GetVerificationQuestionsResponse,
    GetVerificationQuestionsUseCase,
    GetVerificationResultRequest,
    GetVerificationResultResponse,
    GetVerificationResultUseCase,
    VerifyAnswersRequest,
    VerifyAnswersResponse,
    VerifyAnswersUseCase,
)
from vouch.domain.service import JWTService
from vouch.domain.value import DomainType
from vouch.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/verifications", tags=["verifications"], route_class=DishkaRoute
)


class VerifyAnswersBody(BaseModel):
    """Answers keyed by question field name."""

    answers: dict[str, Any]


@router.get(
    "/{domain}/{verification_id}", response_model=GetVerificationResultResponse
)
async def get_verification_result(
    domain: DomainType,
    verification_id: str,
    use_case: FromDishka[GetVerificationResultUseCase],
) -> GetVerificationResultResponse:
    """Describe an invitation link.

    Public: the signup and login pages call it before the user has a session.
    """
    return await use_case.execute(
        GetVerificationResultRequest(domain=domain, verification_id=verification_id)
    )


@router.get(
    "/{domain}/{verification_id}/questions",
    response_model=GetVerificationQuestionsResponse,
)
async def get_verification_questions(
    domain: DomainType,
    verification_id: str,
    use_case: FromDishka[GetVerificationQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVerificationQuestionsResponse:
    """Questionnaire for the verifier the invitation is addressed to."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        GetVerificationQuestionsRequest(
            domain=domain, verification_id=verification_id, verifier_id=user_id
        )
    )


@router.post(
    "/{domain}/{verification_id}/answers", response_model=VerifyAnswersResponse
)
async def verify_answers(
    domain: DomainType,
    verification_id: str,
    body: VerifyAnswersBody,
    use_case: FromDishka[VerifyAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VerifyAnswersResponse:
    """Submit the questionnaire.

    Returns outcome ``FAILED`` when the verifier rejected the subject's facts.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        VerifyAnswersRequest(
            domain=domain,
            verification_id=verification_id,
            verifier_id=user_id,
            answers=body.answers,
        )
    )
