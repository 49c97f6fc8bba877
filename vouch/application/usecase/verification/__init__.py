"""Verification use cases."""

from vouch.application.usecase.verification.get_verification_questions import (
    GetVerificationQuestionsRequest,
    GetVerificationQuestionsResponse,
    GetVerificationQuestionsUseCase,
)
from vouch.application.usecase.verification.get_verification_result import (
    GetVerificationResultRequest,
    GetVerificationResultResponse,
    GetVerificationResultUseCase,
)
from vouch.application.usecase.verification.verify_answers import (
    VerifyAnswersRequest,
    VerifyAnswersResponse,
    VerifyAnswersUseCase,
)

__all__ = [
    "GetVerificationQuestionsRequest",
    "GetVerificationQuestionsResponse",
    "GetVerificationQuestionsUseCase",
    "GetVerificationResultRequest",
    "GetVerificationResultResponse",
    "GetVerificationResultUseCase",
    "VerifyAnswersRequest",
    "VerifyAnswersResponse",
    "VerifyAnswersUseCase",
]
