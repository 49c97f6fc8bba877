"""Caller identity from the auth cookie."""

import logfire

from vouch.config import AuthSettings
from vouch.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Reads the account service's tokens.

    Vouch never issues tokens itself, so this service only verifies them.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """User id of the caller, or None when unauthenticated.

        Args:
            token: Raw ``auth_token`` cookie, if any

        Returns:
            User id for a valid token, otherwise None
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug("Rejected auth cookie", error=str(e))
            return None
