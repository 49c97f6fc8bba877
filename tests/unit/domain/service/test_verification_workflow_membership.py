"""Unit tests for accepting and revoking invitations."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from vouch.adapter.realtime import RecordingRealtimeGateway
from vouch.domain.error import (
    AlreadyMemberError,
    InvitationNotFoundError,
    NotAuthorizedError,
    RevokeNotAllowedError,
)
from vouch.domain.model import Invitation, PlatformSettings, Subject, User
from vouch.domain.service import InviteeDetails, VerificationWorkflow
from vouch.domain.value import DomainType, Email, InvitationId, MembershipRole
from vouch.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_subject, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def make_invitation(
    domain: DomainType,
    inviter: User,
    email: str,
    subject: Subject | None = None,
    verifier: User | None = None,
    created_at: datetime | None = None,
) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        domain=domain,
        subject_id=subject.id if subject else None,
        invited_by=inviter.id,
        verifier_id=verifier.id if verifier else None,
        email=Email(root=email),
        comment="Join us",
        created_at=created_at or datetime.now(),
    )


class TestAcceptInvite:
    """Tests for accept_invite."""

    @pytest.mark.asyncio
    async def test_accept_team_invite_creates_membership(self, unit_env):
        """Accepting stores the membership and marks the invitation accepted."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        owner = make_user("owner@example.com")
        member = make_user("member@example.com", first_name="Mia")
        team = make_subject(DomainType.TEAM, owner, name="Platform")
        invitation = make_invitation(
            DomainType.TEAM, owner, "member@example.com", subject=team, verifier=member
        )
        db.users.extend([owner, member])
        db.subjects.append(team)
        db.invitations.append(invitation)

        # Act
        membership = await workflow.accept_invite(invitation.id, member.id)

        # Assert
        assert membership.domain == DomainType.TEAM
        assert membership.subject_id == team.id
        assert membership.user_id == member.id
        assert membership.role == MembershipRole.ACCEPTED
        assert membership.comment == "Join us"
        assert db.memberships == [membership]
        assert db.invitations[0].is_verified is True

        assert db.notifications[0].user_id == owner.id
        assert db.notifications[0].title == "Platform invitation accepted"
        assert len(gateway.for_user(owner.id)) == 1

    @pytest.mark.asyncio
    async def test_accept_connection_maps_to_inviter(self, unit_env):
        """A connection membership points at the inviting user."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        friend = make_user("friend@example.com", first_name="Finn")
        invitation = make_invitation(DomainType.CONNECTION, owner, "friend@example.com")
        db.users.extend([owner, friend])
        db.invitations.append(invitation)

        # Act
        membership = await workflow.accept_invite(invitation.id, friend.id)

        # Assert
        assert membership.subject_id == owner.id
        assert membership.user_id == friend.id
        assert db.notifications[0].message == (
            "Finn has accepted your connection invitation."
        )

    @pytest.mark.asyncio
    async def test_accept_twice_rejected(self, unit_env):
        """A second accept reports the existing membership."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        member = make_user("member@example.com")
        project = make_subject(DomainType.PROJECT, owner, name="Atlas")
        invitation = make_invitation(
            DomainType.PROJECT, owner, "member@example.com", subject=project
        )
        db.users.extend([owner, member])
        db.subjects.append(project)
        db.invitations.append(invitation)
        await workflow.accept_invite(invitation.id, member.id)

        # Act & Assert
        with pytest.raises(AlreadyMemberError, match="Project invite already accepted"):
            await workflow.accept_invite(invitation.id, member.id)
        assert len(db.memberships) == 1

    @pytest.mark.asyncio
    async def test_accept_by_other_user_rejected(self, unit_env):
        """Only the addressee may accept."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        member = make_user("member@example.com")
        stranger = make_user("stranger@example.com")
        team = make_subject(DomainType.TEAM, owner)
        invitation = make_invitation(
            DomainType.TEAM, owner, "member@example.com", subject=team
        )
        db.users.extend([owner, member, stranger])
        db.subjects.append(team)
        db.invitations.append(invitation)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await workflow.accept_invite(invitation.id, stranger.id)
        assert db.memberships == []

    @pytest.mark.asyncio
    async def test_accept_verification_invite_rejected(self, unit_env):
        """Skill invitations are verified, not accepted."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        member = make_user("member@example.com")
        skill = make_subject(DomainType.SKILL, owner)
        invitation = make_invitation(
            DomainType.SKILL, owner, "member@example.com", subject=skill
        )
        db.users.extend([owner, member])
        db.subjects.append(skill)
        db.invitations.append(invitation)

        # Act & Assert
        with pytest.raises(InvitationNotFoundError, match="Invalid id."):
            await workflow.accept_invite(invitation.id, member.id)


class TestRevokeInvite:
    """Tests for revoke_invite."""

    @pytest.mark.asyncio
    async def test_revoke_connection_within_window(self, unit_env):
        """A fresh connection request can be withdrawn."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        invitation = make_invitation(DomainType.CONNECTION, owner, "friend@example.com")
        db.users.append(owner)
        db.invitations.append(invitation)

        # Act
        revoked = await workflow.revoke_invite(invitation.id, owner.id)

        # Assert
        assert revoked.is_deleted is True
        assert revoked.status is False
        assert db.invitations[0].is_deleted is True

    @pytest.mark.asyncio
    async def test_revoked_email_can_be_invited_again(self, unit_env):
        """A revoked request frees the email for a new one."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        invitation = make_invitation(DomainType.CONNECTION, owner, "friend@example.com")
        db.users.append(owner)
        db.invitations.append(invitation)
        await workflow.revoke_invite(invitation.id, owner.id)

        db.platform_settings.append(PlatformSettings(invites=5, skills=5))

        # Act
        sent = await workflow.send_invite(
            DomainType.CONNECTION,
            None,
            owner.id,
            [InviteeDetails(email="friend@example.com")],
        )

        # Assert
        assert len(sent) == 1
        assert len(db.invitations) == 2

    @pytest.mark.asyncio
    async def test_revoke_after_window_rejected(self, unit_env):
        """Requests older than the revoke window stay."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        invitation = make_invitation(
            DomainType.CONNECTION,
            owner,
            "friend@example.com",
            created_at=datetime.now() - timedelta(days=31),
        )
        db.users.append(owner)
        db.invitations.append(invitation)

        # Act & Assert
        with pytest.raises(
            RevokeNotAllowedError, match="Sorry, you can not revoke this connection."
        ):
            await workflow.revoke_invite(invitation.id, owner.id)
        assert db.invitations[0].is_deleted is False

    @pytest.mark.asyncio
    async def test_revoke_accepted_connection_rejected(self, unit_env):
        """An accepted connection cannot be revoked."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        invitation = make_invitation(
            DomainType.CONNECTION, owner, "friend@example.com"
        ).mark_verified()
        db.users.append(owner)
        db.invitations.append(invitation)

        # Act & Assert
        with pytest.raises(RevokeNotAllowedError):
            await workflow.revoke_invite(invitation.id, owner.id)

    @pytest.mark.asyncio
    async def test_revoke_non_connection_rejected(self, unit_env):
        """Only connection requests can be revoked."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        team = make_subject(DomainType.TEAM, owner)
        invitation = make_invitation(
            DomainType.TEAM, owner, "member@example.com", subject=team
        )
        db.users.append(owner)
        db.subjects.append(team)
        db.invitations.append(invitation)

        # Act & Assert
        with pytest.raises(RevokeNotAllowedError):
            await workflow.revoke_invite(invitation.id, owner.id)

    @pytest.mark.asyncio
    async def test_revoke_by_other_user_rejected(self, unit_env):
        """Only the sender can revoke a request."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        stranger = make_user("stranger@example.com")
        invitation = make_invitation(DomainType.CONNECTION, owner, "friend@example.com")
        db.users.extend([owner, stranger])
        db.invitations.append(invitation)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await workflow.revoke_invite(invitation.id, stranger.id)

    @pytest.mark.asyncio
    async def test_revoke_unknown_invitation(self, unit_env):
        """Revoking a missing invitation reports it as not found."""
        # Arrange
        workflow = await unit_env.get(VerificationWorkflow)

        # Act & Assert
        with pytest.raises(InvitationNotFoundError):
            await workflow.revoke_invite(
                InvitationId(uuid4()), make_user("x@example.com").id
            )
