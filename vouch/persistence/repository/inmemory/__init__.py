"""In-memory repository implementations for testing."""

from vouch.persistence.repository.inmemory.directory import (
    InMemoryPlatformSettingsRepository,
    InMemorySubjectRepository,
    InMemoryUserRepository,
)
from vouch.persistence.repository.inmemory.invitation import InMemoryInvitationRepository
from vouch.persistence.repository.inmemory.membership import InMemoryMembershipRepository
from vouch.persistence.repository.inmemory.notification import (
    InMemoryNotificationRepository,
)
from vouch.persistence.repository.inmemory.question import (
    InMemoryQuestionRepository,
    InMemoryUserAnswerRepository,
)
from vouch.persistence.repository.inmemory.store import (
    InMemoryDatabase,
    InMemoryUnitOfWork,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryInvitationRepository",
    "InMemoryMembershipRepository",
    "InMemoryNotificationRepository",
    "InMemoryPlatformSettingsRepository",
    "InMemoryQuestionRepository",
    "InMemorySubjectRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserAnswerRepository",
    "InMemoryUserRepository",
]
