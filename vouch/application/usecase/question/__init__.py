"""Question bank use cases."""

from vouch.application.usecase.question.list_questions import (
    AnswerItem,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionItem,
)

__all__ = [
    "AnswerItem",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionItem",
]
