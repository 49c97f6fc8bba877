"""Shared in-memory store for testing."""

import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, fields

from vouch.domain.model import (
    Invitation,
    Membership,
    Notification,
    PlatformSettings,
    Question,
    Subject,
    User,
    UserAnswer,
)
from vouch.domain.repository import UnitOfWork


@dataclass
class InMemoryDatabase:
    """Tables backing the in-memory repositories.

    Seed external records (users, subjects, questions, platform settings)
    directly; the repositories read them like their database counterparts.
    """

    users: list[User] = field(default_factory=list)
    subjects: list[Subject] = field(default_factory=list)
    questions: list[Question] = field(default_factory=list)
    platform_settings: list[PlatformSettings] = field(default_factory=list)
    invitations: list[Invitation] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    user_answers: list[UserAnswer] = field(default_factory=list)
    memberships: list[Membership] = field(default_factory=list)

    def snapshot(self) -> dict[str, list]:
        return {f.name: copy.copy(getattr(self, f.name)) for f in fields(self)}

    def restore(self, snapshot: dict[str, list]) -> None:
        for name, rows in snapshot.items():
            setattr(self, name, rows)


class InMemoryUnitOfWork(UnitOfWork):
    """Restores the store to its previous state when a block raises."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot = self.database.snapshot()
        try:
            yield
        except Exception:
            self.database.restore(snapshot)
            raise
