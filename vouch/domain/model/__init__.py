"""Domain model entities for Vouch."""

from vouch.domain.model.invitation import Invitation
from vouch.domain.model.membership import Membership
from vouch.domain.model.notification import Notification
from vouch.domain.model.platform_settings import PlatformSettings
from vouch.domain.model.question import Answer, Question, UserAnswer
from vouch.domain.model.subject import Subject
from vouch.domain.model.user import User

__all__ = [
    "Answer",
    "Invitation",
    "Membership",
    "Notification",
    "PlatformSettings",
    "Question",
    "Subject",
    "User",
    "UserAnswer",
]
