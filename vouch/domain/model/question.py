"""Question bank entities."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vouch.domain.model.common import DomainModel
from vouch.domain.value import (
    AnswerId,
    AnswerType,
    DomainType,
    InvitationId,
    QuestionId,
    UserAnswerId,
    UserId,
)

ACCURACY_FIELD = "acurracy"  # Spelling matches the stored question bank
NPS_FIELD = "recommendation"


class Answer(DomainModel):
    """Allowed answer for a question."""

    id: AnswerId
    question_id: QuestionId
    answer: str
    value: Optional[int] = None
    weight: Optional[float] = None
    type: AnswerType
    created_at: datetime = Field(default_factory=datetime.now)


class Question(DomainModel):
    """Verification question, optionally nested under a parent question."""

    id: QuestionId
    domain: DomainType
    question: str
    field_name: Optional[str] = None
    parent_question_id: Optional[QuestionId] = None
    weightage: Optional[float] = None
    status: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    answers: list[Answer] = []

    @property
    def is_accuracy(self) -> bool:
        return self.field_name == ACCURACY_FIELD


class UserAnswer(DomainModel):
    """Answer chosen by a verifier for one question of one invitation."""

    id: UserAnswerId
    invited_by: UserId
    verified_by: UserId
    question_id: QuestionId
    answer_id: AnswerId
    domain: DomainType
    verification_id: InvitationId
    answer_type: AnswerType
    value: Optional[int] = None
    is_nps: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
