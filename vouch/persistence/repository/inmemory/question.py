"""In-memory question bank repositories for testing."""

from vouch.domain.model.question import Question, UserAnswer
from vouch.domain.repository.question import QuestionRepository, UserAnswerRepository
from vouch.domain.value import DomainType, InvitationId
from vouch.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_domain(self, domain: DomainType) -> list[Question]:
        return sorted(
            (q for q in self.database.questions if q.domain == domain and q.status),
            key=lambda q: q.created_at,
        )


class InMemoryUserAnswerRepository(UserAnswerRepository):
    """In-memory implementation of UserAnswerRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_verification(
        self, verification_id: InvitationId
    ) -> list[UserAnswer]:
        return [
            a for a in self.database.user_answers if a.verification_id == verification_id
        ]

    async def save_many(self, user_answers: list[UserAnswer]) -> list[UserAnswer]:
        self.database.user_answers.extend(user_answers)
        return user_answers
