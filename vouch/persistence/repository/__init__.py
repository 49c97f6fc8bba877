"""PostgreSQL repository implementations."""

from vouch.persistence.repository.invitation import PostgresInvitationRepository
from vouch.persistence.repository.membership import PostgresMembershipRepository
from vouch.persistence.repository.notification import PostgresNotificationRepository
from vouch.persistence.repository.platform_settings import (
    PostgresPlatformSettingsRepository,
)
from vouch.persistence.repository.question import (
    PostgresQuestionRepository,
    PostgresUserAnswerRepository,
)
from vouch.persistence.repository.subject import PostgresSubjectRepository
from vouch.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresInvitationRepository",
    "PostgresMembershipRepository",
    "PostgresNotificationRepository",
    "PostgresPlatformSettingsRepository",
    "PostgresQuestionRepository",
    "PostgresSubjectRepository",
    "PostgresUserAnswerRepository",
    "PostgresUserRepository",
]
