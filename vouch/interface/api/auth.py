"""Cookie authentication for API routes."""

from fastapi import HTTPException, status

from vouch.domain.service import JWTService


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the caller from the ``auth_token`` cookie.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id
