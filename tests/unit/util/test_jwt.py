"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta

import jwt
import pytest

from vouch.config import AuthSettings
from vouch.domain.service import JWTService
from vouch.util.jwt import JWTError, create_token, verify_token


class TestJWT:
    """Tests for token creation and verification."""

    def test_token_carries_user_id_and_email(self):
        settings = AuthSettings(jwt_secret="secret")

        token = create_token("user-1", "user@example.com", settings)
        payload = verify_token(token, settings)

        assert payload.user_id == "user-1"
        assert payload.email == "user@example.com"

    def test_wrong_secret_rejected(self):
        token = create_token("user-1", "user@example.com", AuthSettings(jwt_secret="a"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="b"))

    def test_service_returns_none_for_bad_token(self):
        """Invalid or missing tokens read as unauthenticated."""
        service = JWTService(AuthSettings(jwt_secret="secret"))

        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("not-a-token") is None

    def test_service_reads_user_id(self):
        settings = AuthSettings(jwt_secret="secret")
        service = JWTService(settings)
        token = create_token("user-1", "user@example.com", settings)

        assert service.get_user_id_from_token(token) == "user-1"

    def test_token_without_user_id_rejected(self):
        settings = AuthSettings(jwt_secret="secret")
        token = jwt.encode(
            {"email": "user@example.com", "exp": datetime.now() + timedelta(days=1)},
            "secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, settings)

    def test_expired_token_rejected(self):
        settings = AuthSettings(jwt_secret="secret", jwt_expiry_days=-1)
        token = create_token("user-1", "user@example.com", settings)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)
