"""Domain value objects for Vouch."""

from vouch.domain.value.identifiers import (
    AnswerId,
    InvitationId,
    MembershipId,
    NotificationId,
    QuestionId,
    SubjectId,
    UserAnswerId,
    UserId,
)
from vouch.domain.value.types import (
    MEMBERSHIP_DOMAINS,
    VERIFICATION_DOMAINS,
    AnswerType,
    DomainType,
    Email,
    MembershipRole,
    PhoneNumber,
    VerificationOutcome,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    "SubjectId",
    "NotificationId",
    "QuestionId",
    "AnswerId",
    "UserAnswerId",
    "MembershipId",
    # Types
    "DomainType",
    "VERIFICATION_DOMAINS",
    "MEMBERSHIP_DOMAINS",
    "AnswerType",
    "MembershipRole",
    "VerificationOutcome",
    "Email",
    "PhoneNumber",
]
