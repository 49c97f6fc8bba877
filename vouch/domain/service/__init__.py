"""Domain services."""

from .base import Service
from .invitation_policy import POLICIES, DomainPolicy, InviteLimit, policy_for
from .jwt_service import JWTService
from .mail_service import MailClient, MailService
from .notification_service import NotificationService, RealtimeGateway
from .question_service import QuestionService, VerificationQuestion
from .reconciliation_service import ReconciliationService
from .reputation_service import ReputationClient, ReputationService
from .user_service import UserService
from .verification_result_service import VerificationResult, VerificationResultService
from .verification_workflow import (
    InviteeDetails,
    SentInvitation,
    VerificationAttempt,
    VerificationWorkflow,
)

__all__ = [
    "DomainPolicy",
    "InviteLimit",
    "InviteeDetails",
    "JWTService",
    "MailClient",
    "MailService",
    "NotificationService",
    "POLICIES",
    "QuestionService",
    "RealtimeGateway",
    "ReconciliationService",
    "ReputationClient",
    "ReputationService",
    "SentInvitation",
    "Service",
    "UserService",
    "VerificationAttempt",
    "VerificationQuestion",
    "VerificationResult",
    "VerificationResultService",
    "VerificationWorkflow",
    "policy_for",
]
