"""In-memory repositories for records owned by other services."""

from typing import Optional

from vouch.domain.model import PlatformSettings, Subject, User
from vouch.domain.repository import (
    PlatformSettingsRepository,
    SubjectRepository,
    UserRepository,
)
from vouch.domain.value import DomainType, Email, SubjectId, UserId
from vouch.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        for user in self.database.users:
            if user.id == user_id:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self.database.users:
            if user.email == email:
                return user
        return None


class InMemorySubjectRepository(SubjectRepository):
    """In-memory implementation of SubjectRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(
        self, domain: DomainType, subject_id: SubjectId
    ) -> Optional[Subject]:
        for subject in self.database.subjects:
            if subject.domain == domain and subject.id == subject_id:
                return subject
        return None


class InMemoryPlatformSettingsRepository(PlatformSettingsRepository):
    """In-memory implementation of PlatformSettingsRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def get_active(self) -> Optional[PlatformSettings]:
        return self.database.platform_settings[-1] if self.database.platform_settings else None
