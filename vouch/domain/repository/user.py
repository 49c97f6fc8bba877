"""User repository interface."""

from abc import ABC, abstractmethod

from vouch.domain.model.user import User
from vouch.domain.value import Email, UserId


class UserRepository(ABC):
    """Read access to the account directory."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> User | None:
        """Find a user by email address.

        Args:
            email: Normalized email address

        Returns:
            The user if registered, None otherwise
        """
        pass
