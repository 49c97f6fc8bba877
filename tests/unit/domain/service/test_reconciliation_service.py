"""Unit tests for ReconciliationService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from vouch.adapter.realtime import RecordingRealtimeGateway
from vouch.domain.model import Invitation, User
from vouch.domain.service import (
    InviteeDetails,
    ReconciliationService,
    VerificationWorkflow,
)
from vouch.domain.value import DomainType, Email, InvitationId, SubjectId
from vouch.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_subject, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def pending_invitation(
    domain: DomainType,
    inviter: User,
    email: str,
    created_at: datetime,
    is_verified: bool = False,
) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        domain=domain,
        subject_id=None if domain == DomainType.CONNECTION else SubjectId(uuid4()),
        invited_by=inviter.id,
        email=Email(root=email),
        is_verified=is_verified,
        created_at=created_at,
    )


class TestReconcile:
    """Tests for reconcile and its two steps."""

    @pytest.mark.asyncio
    async def test_attaches_new_user_to_invitations(self, unit_env):
        """Every invitation to the user's email gets the new account id."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        inviter = make_user("inviter@example.com")
        now = datetime.now()
        db.users.append(inviter)
        db.invitations.extend(
            [
                pending_invitation(DomainType.SKILL, inviter, "new@example.com", now),
                pending_invitation(DomainType.TEAM, inviter, "new@example.com", now),
                pending_invitation(DomainType.SKILL, inviter, "other@example.com", now),
            ]
        )
        user = make_user("New@Example.com")
        db.users.append(user)

        # Act
        updated = await service.update_user_info_in_invites(user)

        # Assert
        assert updated == 2
        assert [i.verifier_id for i in db.invitations] == [user.id, user.id, None]

    @pytest.mark.asyncio
    async def test_claimed_and_deleted_invitations_untouched(self, unit_env):
        """Invitations that already have a verifier or were deleted keep their state."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        inviter = make_user("inviter@example.com")
        earlier = make_user("earlier@example.com")
        now = datetime.now()
        verified = pending_invitation(
            DomainType.SKILL, inviter, "new@example.com", now, is_verified=True
        ).model_copy(update={"verifier_id": earlier.id})
        deleted = pending_invitation(
            DomainType.SKILL, inviter, "new@example.com", now
        ).soft_delete()
        db.users.append(inviter)
        db.invitations.extend([verified, deleted])
        user = make_user("new@example.com")

        # Act
        updated = await service.update_user_info_in_invites(user)

        # Assert
        assert updated == 0
        assert db.invitations == [verified, deleted]

    @pytest.mark.asyncio
    async def test_backfills_open_invitations_oldest_first(self, unit_env):
        """Backfilled notifications keep invitation times and are not pushed."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        inviter = make_user("inviter@example.com", first_name="Ivan")
        now = datetime.now()
        connection = pending_invitation(
            DomainType.CONNECTION, inviter, "new@example.com", now - timedelta(days=1)
        )
        skill = pending_invitation(
            DomainType.SKILL, inviter, "new@example.com", now - timedelta(days=3)
        )
        db.users.append(inviter)
        db.invitations.extend([connection, skill])
        user = make_user("new@example.com")
        db.users.append(user)

        # Act
        notifications = await service.reconcile(user)

        # Assert
        assert [n.type_id for n in notifications] == [skill.id, connection.id]
        assert [n.created_at for n in notifications] == [
            skill.created_at,
            connection.created_at,
        ]
        first, second = notifications
        assert first.title == "Invitation to verify skill"
        assert first.message == "Ivan has invited you to verify their skills"
        assert second.title == "Invitation to join connection"
        assert second.message == "Ivan has invited you to join the connection"
        assert all(n.user_id == user.id for n in notifications)
        assert db.notifications == notifications
        assert gateway.events == []

    @pytest.mark.asyncio
    async def test_accepted_connections_not_backfilled(self, unit_env):
        """Connections already accepted are left out of the backfill."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        inviter = make_user("inviter@example.com")
        now = datetime.now()
        accepted = pending_invitation(
            DomainType.CONNECTION, inviter, "new@example.com", now, is_verified=True
        )
        verified_skill = pending_invitation(
            DomainType.SKILL, inviter, "new@example.com", now, is_verified=True
        )
        db.users.append(inviter)
        db.invitations.extend([accepted, verified_skill])
        user = make_user("new@example.com")

        # Act
        notifications = await service.save_invites_as_notifications(user)

        # Assert
        assert [n.type_id for n in notifications] == [verified_skill.id]

    @pytest.mark.asyncio
    async def test_unknown_inviter_named_someone(self, unit_env):
        """Invitations from accounts that no longer exist still backfill."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        ghost = make_user("ghost@example.com")
        db.invitations.append(
            pending_invitation(
                DomainType.EMPLOYMENT, ghost, "new@example.com", datetime.now()
            )
        )
        user = make_user("new@example.com")

        # Act
        notifications = await service.save_invites_as_notifications(user)

        # Assert
        assert notifications[0].message == (
            "Someone has invited you to verify their employment info"
        )

    @pytest.mark.asyncio
    async def test_nothing_to_backfill(self, unit_env):
        """A user nobody invited gets no notifications."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)

        # Act
        notifications = await service.reconcile(make_user("alone@example.com"))

        # Assert
        assert notifications == []
        assert db.notifications == []


class TestReconcileIsRepeatable:
    """Running reconciliation again must not duplicate notifications."""

    @pytest.mark.asyncio
    async def test_second_reconcile_adds_nothing(self, unit_env):
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        inviter = make_user("inviter@example.com")
        db.users.append(inviter)
        db.invitations.append(
            pending_invitation(
                DomainType.SKILL, inviter, "new@example.com", datetime.now()
            )
        )
        user = make_user("new@example.com")
        db.users.append(user)

        # Act
        first = await service.reconcile(user)
        second = await service.reconcile(user)

        # Assert
        assert len(first) == 1
        assert second == []
        assert len(db.notifications) == 1

    @pytest.mark.asyncio
    async def test_registered_invitee_keeps_single_notification(self, unit_env):
        """An invitee notified when the invite was sent is not notified again."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        workflow = await unit_env.get(VerificationWorkflow)
        db = await unit_env.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        verifier = make_user("verifier@example.com")
        skill = make_subject(DomainType.SKILL, owner)
        db.users.extend([owner, verifier])
        db.subjects.append(skill)
        await workflow.send_invite(
            DomainType.SKILL,
            skill.id,
            owner.id,
            [InviteeDetails(email="verifier@example.com", first_name="Vera")],
        )

        # Act
        backfilled = await service.reconcile(verifier)

        # Assert
        assert backfilled == []
        assert [n.user_id for n in db.notifications] == [verifier.id]


class TestReconcileFailureIsolation:
    """A failing domain is logged and the other domains still reconcile."""

    @pytest.mark.asyncio
    async def test_attach_continues_past_failing_domain(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        inviter = make_user("inviter@example.com")
        now = datetime.now()
        db.users.append(inviter)
        db.invitations.extend(
            [
                pending_invitation(DomainType.SKILL, inviter, "new@example.com", now),
                pending_invitation(DomainType.TEAM, inviter, "new@example.com", now),
            ]
        )
        user = make_user("new@example.com")
        attach = service.invitation_repository.attach_verifier_by_email

        async def failing_attach(domain, email, user_id):
            if domain == DomainType.SKILL:
                raise RuntimeError("skill store unavailable")
            return await attach(domain, email, user_id)

        monkeypatch.setattr(
            service.invitation_repository, "attach_verifier_by_email", failing_attach
        )

        # Act
        updated = await service.update_user_info_in_invites(user)

        # Assert
        assert updated == 1
        assert [i.verifier_id for i in db.invitations] == [None, user.id]

    @pytest.mark.asyncio
    async def test_backfill_continues_past_failing_domain(self, unit_env, monkeypatch):
        """The failing domain's partial writes are rolled back."""
        # Arrange
        service = await unit_env.get(ReconciliationService)
        db = await unit_env.get(InMemoryDatabase)
        inviter = make_user("inviter@example.com")
        now = datetime.now()
        skill = pending_invitation(DomainType.SKILL, inviter, "new@example.com", now)
        team = pending_invitation(DomainType.TEAM, inviter, "new@example.com", now)
        db.users.append(inviter)
        db.invitations.extend([skill, team])
        user = make_user("new@example.com")
        find_open = service.invitation_repository.find_open_by_email

        async def failing_find_open(domain, email):
            if domain == DomainType.SKILL:
                db.invitations.append(
                    pending_invitation(DomainType.SKILL, inviter, "stray@example.com", now)
                )
                raise RuntimeError("skill store unavailable")
            return await find_open(domain, email)

        monkeypatch.setattr(
            service.invitation_repository, "find_open_by_email", failing_find_open
        )

        # Act
        notifications = await service.save_invites_as_notifications(user)

        # Assert
        assert [n.type_id for n in notifications] == [team.id]
        assert db.invitations == [skill, team]
        assert db.notifications == notifications
