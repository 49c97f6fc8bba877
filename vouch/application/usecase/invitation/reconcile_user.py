"""Reconcile new user use case."""

import logfire
from pydantic import BaseModel

from vouch.application.usecase.base import BaseUseCase, parse_uuid
from vouch.domain.service import ReconciliationService, UserService
from vouch.domain.value import UserId


class ReconcileUserRequest(BaseModel):
    """Reconcile request for a newly registered user."""

    user_id: str


class ReconcileUserResponse(BaseModel):
    """Reconcile response."""

    notifications_created: int


class ReconcileUserUseCase(BaseUseCase):
    """Use case run by the client right after registration.

    Attaches invitations sent to the user's email before signup and backfills
    the ones still open into the notification inbox.
    """

    def __init__(
        self,
        reconciliation_service: ReconciliationService,
        user_service: UserService,
    ) -> None:
        self.reconciliation_service = reconciliation_service
        self.user_service = user_service

    async def execute(self, request: ReconcileUserRequest) -> ReconcileUserResponse:
        user_id = UserId(parse_uuid(request.user_id))

        with logfire.span("reconcile_user", user_id=str(user_id)):
            user = await self.user_service.get_user(user_id)
            notifications = await self.reconciliation_service.reconcile(user)
            return ReconcileUserResponse(notifications_created=len(notifications))
