"""Application layer DI providers."""

from dishka import Scope, provide

from vouch.application.usecase.invitation import (
    AcceptInviteUseCase,
    ReconcileUserUseCase,
    RevokeInviteUseCase,
    SendInvitesUseCase,
)
from vouch.application.usecase.notification import (
    ListNotificationsUseCase,
    UpdateNotificationUseCase,
)
from vouch.application.usecase.question import ListQuestionsUseCase
from vouch.application.usecase.verification import (
    GetVerificationQuestionsUseCase,
    GetVerificationResultUseCase,
    VerifyAnswersUseCase,
)
from vouch.domain.service import (
    NotificationService,
    QuestionService,
    ReconciliationService,
    UserService,
    VerificationResultService,
    VerificationWorkflow,
)
from vouch.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_send_invites_use_case(
        self, verification_workflow: VerificationWorkflow
    ) -> SendInvitesUseCase:
        """Provide send invitations use case."""
        return SendInvitesUseCase(verification_workflow=verification_workflow)

    @provide(scope=Scope.REQUEST)
    def get_accept_invite_use_case(
        self, verification_workflow: VerificationWorkflow
    ) -> AcceptInviteUseCase:
        """Provide accept invitation use case."""
        return AcceptInviteUseCase(verification_workflow=verification_workflow)

    @provide(scope=Scope.REQUEST)
    def get_revoke_invite_use_case(
        self, verification_workflow: VerificationWorkflow
    ) -> RevokeInviteUseCase:
        """Provide revoke invitation use case."""
        return RevokeInviteUseCase(verification_workflow=verification_workflow)

    @provide(scope=Scope.REQUEST)
    def get_reconcile_user_use_case(
        self,
        reconciliation_service: ReconciliationService,
        user_service: UserService,
    ) -> ReconcileUserUseCase:
        """Provide reconcile user use case."""
        return ReconcileUserUseCase(
            reconciliation_service=reconciliation_service, user_service=user_service
        )

    # Verification use cases
    @provide(scope=Scope.REQUEST)
    def get_verification_result_use_case(
        self, verification_result_service: VerificationResultService
    ) -> GetVerificationResultUseCase:
        """Provide get verification result use case."""
        return GetVerificationResultUseCase(
            verification_result_service=verification_result_service
        )

    @provide(scope=Scope.REQUEST)
    def get_verification_questions_use_case(
        self, verification_workflow: VerificationWorkflow
    ) -> GetVerificationQuestionsUseCase:
        """Provide get verification questions use case."""
        return GetVerificationQuestionsUseCase(
            verification_workflow=verification_workflow
        )

    @provide(scope=Scope.REQUEST)
    def get_verify_answers_use_case(
        self, verification_workflow: VerificationWorkflow
    ) -> VerifyAnswersUseCase:
        """Provide verify answers use case."""
        return VerifyAnswersUseCase(verification_workflow=verification_workflow)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_update_notification_use_case(
        self, notification_service: NotificationService
    ) -> UpdateNotificationUseCase:
        """Provide update notification use case."""
        return UpdateNotificationUseCase(notification_service=notification_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)
