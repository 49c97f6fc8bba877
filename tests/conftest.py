"""Test configuration and shared factories."""

from datetime import datetime
from uuid import uuid4

from vouch.domain.model import Answer, Question, Subject, User
from vouch.domain.value import (
    AnswerId,
    AnswerType,
    DomainType,
    Email,
    PhoneNumber,
    QuestionId,
    SubjectId,
    UserId,
)


def make_user(
    email: str,
    first_name: str = "Test",
    last_name: str = "User",
    phone_number: str | None = None,
) -> User:
    """Build a registered user."""
    return User(
        id=UserId(uuid4()),
        email=Email(root=email),
        first_name=first_name,
        last_name=last_name,
        phone_number=PhoneNumber(root=phone_number) if phone_number else None,
        profile_domain="Backend",
    )


def make_subject(
    domain: DomainType,
    owner: User,
    name: str = "Python",
    role: str | None = None,
    active_from: str | None = None,
    active_to: str | None = None,
) -> Subject:
    """Build a subject owned by ``owner``."""
    return Subject(
        id=SubjectId(uuid4()),
        domain=domain,
        owner_id=owner.id,
        name=name,
        role=role,
        active_from=active_from,
        active_to=active_to,
    )


def make_question(
    domain: DomainType,
    field_name: str | None,
    answers: list[tuple[str, AnswerType, int | None]],
    created_at: datetime | None = None,
    parent: Question | None = None,
    text: str | None = None,
) -> Question:
    """Build a question with answer options given as (label, type, value)."""
    question_id = QuestionId(uuid4())
    return Question(
        id=question_id,
        domain=domain,
        question=text or f"Question about {field_name}",
        field_name=field_name,
        parent_question_id=parent.id if parent else None,
        created_at=created_at or datetime.now(),
        answers=[
            Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                answer=label,
                type=answer_type,
                value=value,
            )
            for label, answer_type, value in answers
        ],
    )
