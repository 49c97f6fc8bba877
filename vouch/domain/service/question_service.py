"""Question bank domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import BaseModel

from vouch.domain.error import InvalidAnswerError
from vouch.domain.model.invitation import Invitation
from vouch.domain.model.question import NPS_FIELD, Answer, Question, UserAnswer
from vouch.domain.model.subject import Subject
from vouch.domain.model.user import User
from vouch.domain.repository import QuestionRepository
from vouch.domain.value import AnswerType, DomainType, UserAnswerId, UserId

from .base import Service


class AnswerOption(BaseModel):
    """Selectable answer shown to a verifier."""

    answer_id: str
    answer: str
    value: int | None = None


class AccuracyFact(BaseModel):
    """Fact about the subject the verifier confirms or rejects."""

    label: str
    value: str
    field_name: str


class VerificationQuestion(BaseModel):
    """Question as presented to a verifier."""

    question_id: str
    question: str
    field_name: str | None
    answer_type: AnswerType | None
    answers: list[AnswerOption] = []
    sub_questions: list["VerificationQuestion"] = []
    facts: list[AccuracyFact] = []
    created_at: datetime


def _options(answers: list[Answer]) -> list[AnswerOption]:
    return [
        AnswerOption(answer_id=str(a.id), answer=a.answer, value=a.value)
        for a in answers
    ]


def _present(question: Question, children: list[Question]) -> VerificationQuestion:
    return VerificationQuestion(
        question_id=str(question.id),
        question=question.question,
        field_name=question.field_name,
        answer_type=question.answers[0].type if question.answers else None,
        answers=_options(question.answers),
        sub_questions=[_present(child, []) for child in children],
        created_at=question.created_at,
    )


def accuracy_facts(owner: User, subject: Subject) -> list[AccuracyFact]:
    """The three facts behind the synthetic accuracy question."""
    return [
        AccuracyFact(label="Name", value=owner.full_name, field_name="userName"),
        AccuracyFact(
            label="Position",
            value=subject.role or owner.profile_domain or "",
            field_name="position",
        ),
        AccuracyFact(
            label="Dates", value=subject.active_range(), field_name="employmentDates"
        ),
    ]


class QuestionService(Service):
    """Domain service over the read-only question bank."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question bank repository
        """
        self.question_repository = question_repository

    async def get_questions(self, domain: DomainType) -> list[Question]:
        with logfire.span("question_service.get_questions", domain=domain.value):
            return await self.question_repository.find_by_domain(domain)

    async def build_questionnaire(
        self, domain: DomainType, owner: User, subject: Subject
    ) -> list[VerificationQuestion]:
        """Build the questionnaire a verifier answers.

        Only top-level questions are returned; child questions are nested as
        ``sub_questions``. The accuracy question carries facts about the
        subject instead of answer options. Questions without a field name
        cannot be answered and are left out.

        Args:
            domain: Verification domain
            owner: Subject owner
            subject: Subject being verified

        Returns:
            Questions ordered by creation time, oldest first
        """
        with logfire.span("question_service.build_questionnaire", domain=domain.value):
            questions = await self.question_repository.find_by_domain(domain)

            children: dict[Any, list[Question]] = {}
            for question in questions:
                if question.parent_question_id is not None:
                    children.setdefault(question.parent_question_id, []).append(question)

            result: list[VerificationQuestion] = []
            for question in questions:
                if question.parent_question_id is not None or not question.field_name:
                    continue
                if question.is_accuracy:
                    result.append(
                        VerificationQuestion(
                            question_id=str(question.id),
                            question=question.question,
                            field_name=question.field_name,
                            answer_type=AnswerType.CUSTOM,
                            facts=accuracy_facts(owner, subject),
                            created_at=question.created_at,
                        )
                    )
                    continue
                result.append(_present(question, children.get(question.id, [])))

            result.sort(key=lambda q: q.created_at)
            logfire.info(
                "Questionnaire built", domain=domain.value, question_count=len(result)
            )
            return result

    async def resolve_answers(
        self,
        invitation: Invitation,
        verifier_id: UserId,
        answers: dict[str, Any],
        skip_fields: tuple[str, ...] = (),
    ) -> list[UserAnswer]:
        """Map submitted answers onto the configured answer options.

        Questions with several options expect the chosen answer id; questions
        with a single option select it automatically. Rating answers also
        record the submitted number.

        Args:
            invitation: Invitation being verified
            verifier_id: Verifier submitting the answers
            answers: Submitted values keyed by question field name
            skip_fields: Field names handled elsewhere (gate fields)

        Returns:
            One unsaved UserAnswer per answerable question

        Raises:
            InvalidAnswerError: If a submitted answer does not match the
                question's options
        """
        with logfire.span(
            "question_service.resolve_answers",
            invitation_id=str(invitation.id),
            domain=invitation.domain.value,
        ):
            questions = await self.question_repository.find_by_domain(invitation.domain)
            resolved: list[UserAnswer] = []

            for question in questions:
                field = question.field_name
                if not field or question.is_accuracy or field in skip_fields:
                    continue
                if not question.answers:
                    continue

                submitted = answers.get(field)
                answer = self._select_answer(question, submitted)
                value = self._rating_value(question, answer, submitted)

                resolved.append(
                    UserAnswer(
                        id=UserAnswerId(uuid4()),
                        invited_by=invitation.invited_by,
                        verified_by=verifier_id,
                        question_id=question.id,
                        answer_id=answer.id,
                        domain=invitation.domain,
                        verification_id=invitation.id,
                        answer_type=answer.type,
                        value=value,
                        is_nps=field == NPS_FIELD,
                        created_at=datetime.now(),
                    )
                )

            logfire.info(
                "Answers resolved",
                invitation_id=str(invitation.id),
                answer_count=len(resolved),
            )
            return resolved

    @staticmethod
    def _select_answer(question: Question, submitted: Any) -> Answer:
        if len(question.answers) == 1:
            return question.answers[0]
        for answer in question.answers:
            if str(answer.id) == str(submitted):
                return answer
        raise InvalidAnswerError(question.field_name or str(question.id))

    @staticmethod
    def _rating_value(question: Question, answer: Answer, submitted: Any) -> int | None:
        if answer.type != AnswerType.RATING:
            return None
        if len(question.answers) > 1:
            return answer.value
        if isinstance(submitted, bool):
            raise InvalidAnswerError(question.field_name or str(question.id))
        try:
            return int(submitted)
        except (TypeError, ValueError):
            raise InvalidAnswerError(question.field_name or str(question.id))
