"""Auth cookie tokens.

The account service signs tokens with a secret shared with this service.
Vouch only needs to read them; ``create_token`` signs one the same way for
scripts and tests.
"""

from datetime import datetime, timedelta

import jwt
from pydantic import BaseModel

from vouch.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by the auth cookie."""

    user_id: str
    email: str
    exp: datetime


class JWTError(Exception):
    """Token could not be read."""


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    expires_at = datetime.now() + timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "email": email, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token signed by the account service.

    Raises:
        JWTError: If the signature is wrong, the token expired, or a claim
            is missing
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    if "user_id" not in claims or "email" not in claims:
        raise JWTError("Invalid token")
    return TokenPayload(**claims)
