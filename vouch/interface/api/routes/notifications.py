"""Notification inbox routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from vouch.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    UpdateNotificationRequest,
    UpdateNotificationResponse,
    UpdateNotificationUseCase,
)
from vouch.domain.service import JWTService
from vouch.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class UpdateNotificationBody(BaseModel):
    """Fields the recipient may change."""

    viewed: bool | None = None
    remove: bool | None = None


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """Caller's notifications, newest first."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(ListNotificationsRequest(user_id=user_id))


@router.patch("/{notification_id}", response_model=UpdateNotificationResponse)
async def update_notification(
    notification_id: str,
    body: UpdateNotificationBody,
    use_case: FromDishka[UpdateNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateNotificationResponse:
    """Mark a notification viewed or remove it from the inbox."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        UpdateNotificationRequest(
            notification_id=notification_id,
            user_id=user_id,
            viewed=body.viewed,
            remove=body.remove,
        )
    )
