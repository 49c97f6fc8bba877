"""List questions use case."""

from datetime import datetime

from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase
from vouch.domain.service import QuestionService
from vouch.domain.value import AnswerType, DomainType


class AnswerItem(BaseModel):
    """Configured answer option."""

    answer_id: str
    answer: str
    value: int | None
    weight: float | None
    type: AnswerType


class QuestionItem(BaseModel):
    """Question bank entry."""

    question_id: str
    question: str
    field_name: str | None
    parent_question_id: str | None
    weightage: float | None
    answers: list[AnswerItem]
    created_at: datetime


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    domain: DomainType


class ListQuestionsResponse(BaseModel):
    """Active questions of a domain, oldest first."""

    domain: DomainType
    questions: list[QuestionItem]


class ListQuestionsUseCase(BaseUseCase):
    """Use case for reading a domain's question bank."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        questions = await self.question_service.get_questions(request.domain)
        return ListQuestionsResponse(
            domain=request.domain,
            questions=[
                QuestionItem(
                    question_id=str(q.id),
                    question=q.question,
                    field_name=q.field_name,
                    parent_question_id=(
                        str(q.parent_question_id) if q.parent_question_id else None
                    ),
                    weightage=q.weightage,
                    answers=[
                        AnswerItem(
                            answer_id=str(a.id),
                            answer=a.answer,
                            value=a.value,
                            weight=a.weight,
                            type=a.type,
                        )
                        for a in q.answers
                    ],
                    created_at=q.created_at,
                )
                for q in questions
            ],
        )
