"""Question bank repository interfaces."""

from abc import ABC, abstractmethod

from vouch.domain.model.question import Question, UserAnswer
from vouch.domain.value import DomainType, InvitationId


class QuestionRepository(ABC):
    """Read-only access to the question bank."""

    @abstractmethod
    async def find_by_domain(self, domain: DomainType) -> list[Question]:
        """Find the active questions of a domain with their answers attached.

        Args:
            domain: Verification domain

        Returns:
            Questions, top-level and nested, ordered by creation time
        """
        pass


class UserAnswerRepository(ABC):
    """Repository for answers submitted by verifiers."""

    @abstractmethod
    async def find_by_verification(
        self, verification_id: InvitationId
    ) -> list[UserAnswer]:
        """Find the answers recorded for an invitation."""
        pass

    @abstractmethod
    async def save_many(self, user_answers: list[UserAnswer]) -> list[UserAnswer]:
        """Insert several answers."""
        pass
