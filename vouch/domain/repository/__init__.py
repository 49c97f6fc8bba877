"""Repository interfaces for Vouch domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from vouch.domain.repository.invitation import InvitationRepository
from vouch.domain.repository.membership import MembershipRepository
from vouch.domain.repository.notification import NotificationRepository
from vouch.domain.repository.platform_settings import PlatformSettingsRepository
from vouch.domain.repository.question import QuestionRepository, UserAnswerRepository
from vouch.domain.repository.subject import SubjectRepository
from vouch.domain.repository.unit_of_work import UnitOfWork
from vouch.domain.repository.user import UserRepository

__all__ = [
    "InvitationRepository",
    "MembershipRepository",
    "NotificationRepository",
    "PlatformSettingsRepository",
    "QuestionRepository",
    "SubjectRepository",
    "UnitOfWork",
    "UserAnswerRepository",
    "UserRepository",
]
