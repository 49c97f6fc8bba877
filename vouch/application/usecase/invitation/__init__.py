"""Invitation use cases."""

from vouch.application.usecase.invitation.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
)
from vouch.application.usecase.invitation.reconcile_user import (
    ReconcileUserRequest,
    ReconcileUserResponse,
    ReconcileUserUseCase,
)
from vouch.application.usecase.invitation.revoke_invite import (
    RevokeInviteRequest,
    RevokeInviteResponse,
    RevokeInviteUseCase,
)
from vouch.application.usecase.invitation.send_invites import (
    InvitationItem,
    InviteeInfo,
    SendInvitesRequest,
    SendInvitesResponse,
    SendInvitesUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "InvitationItem",
    "InviteeInfo",
    "ReconcileUserRequest",
    "ReconcileUserResponse",
    "ReconcileUserUseCase",
    "RevokeInviteRequest",
    "RevokeInviteResponse",
    "RevokeInviteUseCase",
    "SendInvitesRequest",
    "SendInvitesResponse",
    "SendInvitesUseCase",
]
