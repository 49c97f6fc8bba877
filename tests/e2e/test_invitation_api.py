"""End-to-end tests for the invitation, verification and notification API.

Authentication tests use the synchronous TestClient. Flow tests drive the app
through an httpx AsyncClient so the in-memory store can be seeded from the
same event loop.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from vouch.adapter.mail import MockMailClient
from vouch.adapter.realtime import RecordingRealtimeGateway
from vouch.config import Settings
from vouch.domain.model import PlatformSettings, User
from vouch.domain.value import DomainType
from vouch.interface.api.app import create_app
from vouch.persistence.repository.inmemory import InMemoryDatabase
from vouch.util.di.container import setup_di
from vouch.util.jwt import create_token
from tests.conftest import make_subject, make_user
from tests.di import build_test_container


def auth_cookie(user: User) -> dict[str, str]:
    token = create_token(str(user.id), user.email.root, Settings().auth)
    return {"auth_token": token}


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    return TestClient(app_instance)


@pytest_asyncio.fixture
async def api():
    """Async client plus the container behind it."""
    app_instance = create_app()
    container = build_test_container()
    setup_di(app_instance, container)
    async with AsyncClient(
        transport=ASGITransport(app=app_instance), base_url="http://testserver"
    ) as http_client:
        yield http_client, container
    await container.close()


class TestAuthentication:
    """Protected endpoints reject anonymous callers."""

    @pytest.mark.parametrize(
        "method, path, body",
        [
            (
                "post",
                "/invitations/SKILLS",
                {"subject_id": str(uuid4()), "invitees": [{"email": "a@example.com"}]},
            ),
            ("post", "/invitations/reconcile", None),
            ("post", f"/invitations/{uuid4()}/accept", None),
            ("post", f"/invitations/{uuid4()}/revoke", None),
            ("get", f"/verifications/SKILLS/{uuid4()}/questions", None),
            ("post", f"/verifications/SKILLS/{uuid4()}/answers", {"answers": {}}),
            ("get", "/notifications", None),
            ("patch", f"/notifications/{uuid4()}", {"viewed": True}),
        ],
    )
    def test_requires_auth_cookie(self, client, method, path, body):
        # Act
        response = client.request(method.upper(), path, json=body)

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    def test_invalid_token_rejected(self, client):
        # Act
        response = client.get("/notifications", cookies={"auth_token": "invalid-token"})

        # Assert
        assert response.status_code == 401


class TestVerificationLookup:
    """GET /verifications/{domain}/{id} is public."""

    def test_malformed_id(self, client):
        # Act
        response = client.get("/verifications/SKILLS/not-a-uuid")

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid verification id."

    def test_unknown_id(self, client):
        # Act
        response = client.get(f"/verifications/SKILLS/{uuid4()}")

        # Assert
        assert response.status_code == 400

    def test_unknown_domain(self, client):
        # Act
        response = client.get(f"/verifications/BOGUS/{uuid4()}")

        # Assert
        assert response.status_code == 422


class TestInvitationFlow:
    """Invite, look up, verify and read notifications over HTTP."""

    @pytest.mark.asyncio
    async def test_skill_verification_flow(self, api):
        # Arrange
        http_client, container = api
        db = await container.get(InMemoryDatabase)
        mail = await container.get(MockMailClient)
        gateway = await container.get(RecordingRealtimeGateway)
        owner = make_user("owner@example.com", first_name="Olga")
        verifier = make_user("verifier@example.com", first_name="Vera")
        skill = make_subject(DomainType.SKILL, owner, name="Python")
        db.users.extend([owner, verifier])
        db.subjects.append(skill)

        # Act - send
        sent = await http_client.post(
            "/invitations/SKILLS",
            json={
                "subject_id": str(skill.id),
                "invitees": [{"email": "Verifier@Example.com", "first_name": "Vera"}],
            },
            cookies=auth_cookie(owner),
        )

        # Assert - send
        assert sent.status_code == 201, sent.text
        item = sent.json()["invitations"][0]
        assert item["is_registered"] is True
        assert "type=SKILLS" in item["verification_url"]
        assert len(mail.sent) == 1
        assert len(gateway.for_user(verifier.id)) == 1

        # Act - public lookup
        lookup = await http_client.get(f"/verifications/SKILLS/{item['invitation_id']}")

        # Assert - public lookup
        assert lookup.status_code == 200
        assert lookup.json()["is_registered"] is True
        assert lookup.json()["email"] == "verifier@example.com"

        # Act - verify
        verified = await http_client.post(
            f"/verifications/SKILLS/{item['invitation_id']}/answers",
            json={"answers": {}},
            cookies=auth_cookie(verifier),
        )

        # Assert - verify
        assert verified.status_code == 200, verified.text
        assert verified.json()["outcome"] == "VERIFIED"

        # Act - owner inbox
        inbox = await http_client.get("/notifications", cookies=auth_cookie(owner))

        # Assert - owner inbox
        assert inbox.status_code == 200
        notifications = inbox.json()["notifications"]
        assert [n["title"] for n in notifications] == ["Python skills verified"]
        assert inbox.json()["unread_count"] == 1

        # Act - verify again
        again = await http_client.post(
            f"/verifications/SKILLS/{item['invitation_id']}/answers",
            json={"answers": {}},
            cookies=auth_cookie(verifier),
        )

        # Assert - verify again
        assert again.status_code == 409
        assert again.json()["detail"] == "Already verified."

    @pytest.mark.asyncio
    async def test_self_invite_is_bad_request(self, api):
        # Arrange
        http_client, container = api
        db = await container.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        skill = make_subject(DomainType.SKILL, owner)
        db.users.append(owner)
        db.subjects.append(skill)

        # Act
        response = await http_client.post(
            "/invitations/SKILLS",
            json={
                "subject_id": str(skill.id),
                "invitees": [{"email": "owner@example.com"}],
            },
            cookies=auth_cookie(owner),
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"] == "User can not send invite to self."

    @pytest.mark.asyncio
    async def test_duplicate_invite_is_conflict(self, api):
        # Arrange
        http_client, container = api
        db = await container.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        skill = make_subject(DomainType.SKILL, owner)
        db.users.append(owner)
        db.subjects.append(skill)
        body = {"subject_id": str(skill.id), "invitees": [{"email": "a@example.com"}]}
        await http_client.post(
            "/invitations/SKILLS", json=body, cookies=auth_cookie(owner)
        )

        # Act
        response = await http_client.post(
            "/invitations/SKILLS", json=body, cookies=auth_cookie(owner)
        )

        # Assert
        assert response.status_code == 409
        assert response.json()["detail"] == "Already sent invitation to a@example.com."

    @pytest.mark.asyncio
    async def test_connection_accept_and_reconcile(self, api):
        """An unregistered invitee signs up, reconciles and accepts."""
        # Arrange
        http_client, container = api
        db = await container.get(InMemoryDatabase)
        owner = make_user("owner@example.com", first_name="Olga")
        db.users.append(owner)
        db.platform_settings.append(PlatformSettings(invites=10, skills=5))
        sent = await http_client.post(
            "/invitations/CONNECTION",
            json={"invitees": [{"email": "friend@example.com"}]},
            cookies=auth_cookie(owner),
        )
        invitation_id = sent.json()["invitations"][0]["invitation_id"]
        friend = make_user("friend@example.com")
        db.users.append(friend)

        # Act
        reconciled = await http_client.post(
            "/invitations/reconcile", cookies=auth_cookie(friend)
        )
        accepted = await http_client.post(
            f"/invitations/{invitation_id}/accept", cookies=auth_cookie(friend)
        )

        # Assert
        assert sent.status_code == 201, sent.text
        assert reconciled.status_code == 200
        assert reconciled.json()["notifications_created"] == 1
        assert accepted.status_code == 200, accepted.text
        assert accepted.json()["subject_id"] == str(owner.id)
        assert accepted.json()["domain"] == "CONNECTION"

    @pytest.mark.asyncio
    async def test_notification_of_other_user_is_forbidden(self, api):
        # Arrange
        http_client, container = api
        db = await container.get(InMemoryDatabase)
        owner = make_user("owner@example.com")
        stranger = make_user("stranger@example.com")
        verifier = make_user("verifier@example.com")
        skill = make_subject(DomainType.SKILL, owner)
        db.users.extend([owner, stranger, verifier])
        db.subjects.append(skill)
        await http_client.post(
            "/invitations/SKILLS",
            json={
                "subject_id": str(skill.id),
                "invitees": [{"email": "verifier@example.com"}],
            },
            cookies=auth_cookie(owner),
        )
        notification_id = db.notifications[0].id

        # Act
        response = await http_client.patch(
            f"/notifications/{notification_id}",
            json={"viewed": True},
            cookies=auth_cookie(stranger),
        )

        # Assert
        assert response.status_code == 403
