"""Unit tests for MailService."""

from uuid import uuid4

import pytest

from vouch.adapter.error import MailDeliveryError
from vouch.adapter.mail import MockMailClient
from vouch.domain.model import Invitation, Subject
from vouch.domain.service import MailService
from vouch.domain.value import DomainType, Email, InvitationId, SubjectId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

URL = "http://localhost:3000/verify?id=1"


def invitation_for(subject: Subject | None, domain: DomainType, owner_id) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        domain=domain,
        subject_id=subject.id if subject else None,
        invited_by=owner_id,
        email=Email(root="vera@example.com"),
        first_name="Vera",
        last_name="Lind",
        designation="Designer",
        comment="Please confirm",
    )


class TestBuildInvitePayload:
    """Tests for build_invite_payload."""

    def test_common_fields_and_phone_format(self):
        """Every payload carries the inviter's formatted contact details."""
        # Arrange
        service = MailService(MockMailClient())
        owner = make_user(
            "owner@example.com",
            first_name="Olga",
            last_name="Ivanova",
            phone_number="555 123 4567",
        )
        skill = Subject(
            id=SubjectId(uuid4()),
            domain=DomainType.SKILL,
            owner_id=owner.id,
            name="Python",
            role="Expert",
            experience="5 years",
        )
        invitation = invitation_for(skill, DomainType.SKILL, owner.id)

        # Act
        payload = service.build_invite_payload(invitation, skill, owner, URL)

        # Assert
        assert payload["name"] == "Vera Lind"
        assert payload["comment"] == "Please confirm"
        assert payload["invitedByName"] == "Olga Ivanova"
        assert payload["invitedByEmail"] == "owner@example.com"
        assert payload["invitedByPhoneNumber"] == "+1(555)123-4567"
        assert payload["verificationUrl"] == URL
        assert payload["skillName"] == "Python"
        assert payload["level"] == "Expert"
        assert payload["experience"] == "5 years"

    def test_employment_fields(self):
        """Employment mails show the organization and active years."""
        # Arrange
        service = MailService(MockMailClient())
        owner = make_user("owner@example.com")
        job = Subject(
            id=SubjectId(uuid4()),
            domain=DomainType.EMPLOYMENT,
            owner_id=owner.id,
            name="Acme",
            role="Engineer",
            active_from="2019-03",
        )
        invitation = invitation_for(job, DomainType.EMPLOYMENT, owner.id)

        # Act
        payload = service.build_invite_payload(invitation, job, owner, URL)

        # Assert
        assert payload["organizationName"] == "Acme"
        assert payload["role"] == "Engineer"
        assert payload["activeYears"] == "2019-03 - PRESENT"
        assert payload["invitedByPhoneNumber"] == ""

    def test_team_fields(self):
        """Team mails list the required skills and the invitee designation."""
        # Arrange
        service = MailService(MockMailClient())
        owner = make_user("owner@example.com")
        team = Subject(
            id=SubjectId(uuid4()),
            domain=DomainType.TEAM,
            owner_id=owner.id,
            name="Platform",
            description="Infra team",
            required_skills=["Python", "Go"],
        )
        invitation = invitation_for(team, DomainType.TEAM, owner.id)

        # Act
        payload = service.build_invite_payload(invitation, team, owner, URL)

        # Assert
        assert payload["teamName"] == "Platform"
        assert payload["description"] == "Infra team"
        assert payload["requiredSkills"] == "Python, Go"
        assert payload["designation"] == "Designer"

    def test_connection_uses_comment_as_description(self):
        """Connection mails have no subject."""
        # Arrange
        service = MailService(MockMailClient())
        owner = make_user("owner@example.com")
        invitation = invitation_for(None, DomainType.CONNECTION, owner.id)

        # Act
        payload = service.build_invite_payload(invitation, None, owner, URL)

        # Assert
        assert payload["description"] == "Please confirm"


class TestSendInvite:
    """Tests for send_invite."""

    @pytest.mark.asyncio
    async def test_send_uses_domain_template(self, unit_env):
        """The mail goes to the invitee with the domain's template."""
        # Arrange
        service = await unit_env.get(MailService)
        client = await unit_env.get(MockMailClient)
        owner = make_user("owner@example.com")
        invitation = invitation_for(None, DomainType.CONNECTION, owner.id)

        # Act
        await service.send_invite(invitation, None, owner, URL)

        # Assert
        assert len(client.sent) == 1
        mail = client.sent[0]
        assert mail.template == "connection-invite"
        assert mail.subject == "You have a new connection request"
        assert mail.to == "vera@example.com"

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, unit_env):
        """Delivery errors reach the caller, who decides whether to continue."""
        # Arrange
        service = await unit_env.get(MailService)
        client = await unit_env.get(MockMailClient)
        client.fail = True
        owner = make_user("owner@example.com")
        invitation = invitation_for(None, DomainType.CONNECTION, owner.id)

        # Act & Assert
        with pytest.raises(MailDeliveryError):
            await service.send_invite(invitation, None, owner, URL)
