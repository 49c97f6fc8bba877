"""Unit tests for the Invitation entity."""

from uuid import uuid4

import pytest

from vouch.domain.error import AlreadyVerifiedError
from vouch.domain.model import Invitation
from vouch.domain.value import DomainType, Email, InvitationId, SubjectId, UserId


def make_invitation(domain: DomainType = DomainType.SKILL) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        domain=domain,
        subject_id=None if domain == DomainType.CONNECTION else SubjectId(uuid4()),
        invited_by=UserId(uuid4()),
        email=Email(root="vera@example.com"),
        first_name="Vera",
        last_name="Lind",
    )


class TestInvitation:
    """Tests for Invitation state changes."""

    def test_scope_is_subject_or_inviter(self):
        """Connections are scoped by their inviter."""
        skill = make_invitation()
        connection = make_invitation(DomainType.CONNECTION)

        assert skill.scope_id == skill.subject_id
        assert connection.scope_id == connection.invited_by

    def test_mark_verified_returns_copy(self):
        """Verifying leaves the original untouched."""
        invitation = make_invitation()
        verifier_id = UserId(uuid4())

        verified = invitation.mark_verified(verifier_id)

        assert verified.is_verified is True
        assert verified.verifier_id == verifier_id
        assert verified.updated_at is not None
        assert invitation.is_verified is False

    def test_mark_verified_twice_rejected(self):
        verified = make_invitation().mark_verified(UserId(uuid4()))

        with pytest.raises(AlreadyVerifiedError):
            verified.mark_verified()

    def test_soft_delete(self):
        deleted = make_invitation().soft_delete()

        assert deleted.is_deleted is True
        assert deleted.status is False

    def test_name(self):
        assert make_invitation().name == "Vera Lind"
