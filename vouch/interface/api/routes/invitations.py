"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from vouch.application.usecase.invitation import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    InviteeInfo,
    ReconcileUserRequest,
    ReconcileUserResponse,
    ReconcileUserUseCase,
    RevokeInviteRequest,
    RevokeInviteResponse,
    RevokeInviteUseCase,
    SendInvitesRequest,
    SendInvitesResponse,
    SendInvitesUseCase,
)
from vouch.domain.service import JWTService
from vouch.domain.value import DomainType
from vouch.interface.api.auth import require_user_id

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class SendInvitesBody(BaseModel):
    """Request body for sending invitations."""

    subject_id: str | None = None
    invitees: list[InviteeInfo] = Field(min_length=1)


# Declared before /{domain} so "reconcile" is not parsed as a domain
@router.post("/reconcile", response_model=ReconcileUserResponse)
async def reconcile_user(
    use_case: FromDishka[ReconcileUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReconcileUserResponse:
    """Attach invitations sent before signup to the authenticated user.

    Called by the client once, right after registration.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(ReconcileUserRequest(user_id=user_id))


@router.post(
    "/{domain}",
    response_model=SendInvitesResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_invites(
    domain: DomainType,
    body: SendInvitesBody,
    use_case: FromDishka[SendInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SendInvitesResponse:
    """Invite people to verify or join one of the caller's subjects.

    Args:
        domain: Invitation domain (SKILLS, EMPLOYMENT, CLIENT_PROJECT, PROJECT,
            TEAM or CONNECTION)
        body: Subject and invitees
        use_case: Send invitations use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Stored invitations with their verification links
    """
    user_id = require_user_id(jwt_service, auth_token)
    request = SendInvitesRequest(
        domain=domain,
        inviter_id=user_id,
        subject_id=body.subject_id,
        invitees=body.invitees,
    )
    return await use_case.execute(request)


@router.post("/{invitation_id}/accept", response_model=AcceptInviteResponse)
async def accept_invite(
    invitation_id: str,
    use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptInviteResponse:
    """Accept a project, team or connection invitation."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        AcceptInviteRequest(invitation_id=invitation_id, user_id=user_id)
    )


@router.post("/{invitation_id}/revoke", response_model=RevokeInviteResponse)
async def revoke_invite(
    invitation_id: str,
    use_case: FromDishka[RevokeInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RevokeInviteResponse:
    """Withdraw a pending connection request sent by the caller."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        RevokeInviteRequest(invitation_id=invitation_id, user_id=user_id)
    )
