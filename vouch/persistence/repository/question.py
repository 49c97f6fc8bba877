"""PostgreSQL implementation of the question bank repositories."""

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from vouch.domain.model import Answer, Question, UserAnswer
from vouch.domain.repository import QuestionRepository, UserAnswerRepository
from vouch.domain.value import DomainType, InvitationId
from vouch.persistence.mappers import (
    row_to_answer,
    row_to_question,
    row_to_user_answer,
    user_answer_to_dict,
)
from vouch.persistence.tables import answers_table, questions_table, user_answers_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_domain(self, domain: DomainType) -> list[Question]:
        """Load a domain's active questions and their active answers.

        Two queries: questions first, then every answer for those questions.
        """
        question_stmt = (
            select(questions_table)
            .where(
                and_(
                    questions_table.c.domain == domain.value,
                    questions_table.c.status.is_(True),
                )
            )
            .order_by(questions_table.c.created_at.asc())
        )
        result = await self.session.execute(question_stmt)
        question_rows = [dict(row) for row in result.mappings().all()]
        if not question_rows:
            return []

        answer_stmt = (
            select(answers_table)
            .where(
                and_(
                    answers_table.c.question_id.in_([r["id"] for r in question_rows]),
                    answers_table.c.status.is_(True),
                )
            )
            .order_by(answers_table.c.created_at.asc())
        )
        result = await self.session.execute(answer_stmt)

        answers_by_question: dict = {}
        for row in result.mappings().all():
            answer: Answer = row_to_answer(dict(row))
            answers_by_question.setdefault(answer.question_id, []).append(answer)

        return [
            row_to_question(row, answers_by_question.get(row["id"], []))
            for row in question_rows
        ]


class PostgresUserAnswerRepository(UserAnswerRepository):
    """PostgreSQL implementation of UserAnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_verification(
        self, verification_id: InvitationId
    ) -> list[UserAnswer]:
        stmt = (
            select(user_answers_table)
            .where(user_answers_table.c.verification_id == verification_id)
            .order_by(user_answers_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_user_answer(dict(row)) for row in result.mappings().all()]

    async def save_many(self, user_answers: list[UserAnswer]) -> list[UserAnswer]:
        if not user_answers:
            return []
        await self.session.execute(
            insert(user_answers_table),
            [user_answer_to_dict(a) for a in user_answers],
        )
        await self.session.flush()
        return user_answers
