"""User domain service."""

import logfire

from vouch.domain.error import UserNotFoundError
from vouch.domain.model.user import User
from vouch.domain.repository import UserRepository
from vouch.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Lookups against the account directory."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_user(self, user_id: UserId) -> User:
        """Get a user that must exist.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            UserNotFoundError: If no such user exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("User not found", user_id=str(user_id))
            raise UserNotFoundError(str(user_id))
        return user

    async def find_user_by_email(self, email: Email) -> User | None:
        return await self.user_repository.find_by_email(email)
