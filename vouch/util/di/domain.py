"""Domain layer DI providers."""

from dishka import Scope, provide

from vouch.config import AuthSettings, Settings
from vouch.domain.repository import (
    InvitationRepository,
    MembershipRepository,
    NotificationRepository,
    PlatformSettingsRepository,
    QuestionRepository,
    SubjectRepository,
    UnitOfWork,
    UserAnswerRepository,
    UserRepository,
)
from vouch.domain.service import (
    JWTService,
    MailClient,
    MailService,
    NotificationService,
    QuestionService,
    RealtimeGateway,
    ReconciliationService,
    ReputationClient,
    ReputationService,
    UserService,
    VerificationResultService,
    VerificationWorkflow,
)
from vouch.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question bank domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        realtime_gateway: RealtimeGateway,
        unit_of_work: UnitOfWork,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            realtime_gateway=realtime_gateway,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_mail_service(self, mail_client: MailClient) -> MailService:
        """Provide mail domain service."""
        return MailService(mail_client=mail_client)

    @provide
    def get_reputation_service(
        self, reputation_client: ReputationClient
    ) -> ReputationService:
        """Provide reputation trigger service."""
        return ReputationService(reputation_client=reputation_client)

    @provide
    def get_verification_workflow(
        self,
        invitation_repository: InvitationRepository,
        subject_repository: SubjectRepository,
        membership_repository: MembershipRepository,
        user_answer_repository: UserAnswerRepository,
        platform_settings_repository: PlatformSettingsRepository,
        unit_of_work: UnitOfWork,
        user_service: UserService,
        question_service: QuestionService,
        notification_service: NotificationService,
        mail_service: MailService,
        reputation_service: ReputationService,
        settings: Settings,
    ) -> VerificationWorkflow:
        """Provide verification workflow domain service."""
        return VerificationWorkflow(
            invitation_repository=invitation_repository,
            subject_repository=subject_repository,
            membership_repository=membership_repository,
            user_answer_repository=user_answer_repository,
            platform_settings_repository=platform_settings_repository,
            unit_of_work=unit_of_work,
            user_service=user_service,
            question_service=question_service,
            notification_service=notification_service,
            mail_service=mail_service,
            reputation_service=reputation_service,
            settings=settings,
        )

    @provide
    def get_reconciliation_service(
        self,
        invitation_repository: InvitationRepository,
        user_repository: UserRepository,
        notification_repository: NotificationRepository,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> ReconciliationService:
        """Provide reconciliation domain service."""
        return ReconciliationService(
            invitation_repository=invitation_repository,
            user_repository=user_repository,
            notification_repository=notification_repository,
            notification_service=notification_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_verification_result_service(
        self, invitation_repository: InvitationRepository
    ) -> VerificationResultService:
        """Provide verification result domain service."""
        return VerificationResultService(invitation_repository=invitation_repository)
