"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from vouch.config import Settings
from vouch.domain.repository import (
    InvitationRepository,
    MembershipRepository,
    NotificationRepository,
    PlatformSettingsRepository,
    QuestionRepository,
    SubjectRepository,
    UnitOfWork,
    UserAnswerRepository,
    UserRepository,
)
from vouch.persistence.database import create_engine, create_session_factory
from vouch.persistence.repository import (
    PostgresInvitationRepository,
    PostgresMembershipRepository,
    PostgresNotificationRepository,
    PostgresPlatformSettingsRepository,
    PostgresQuestionRepository,
    PostgresSubjectRepository,
    PostgresUserAnswerRepository,
    PostgresUserRepository,
)
from vouch.persistence.unit_of_work import SessionUnitOfWork
from vouch.util.di.base import ProviderBase
from vouch.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Writes are committed by the unit of work as they happen; anything
        left pending is committed at the end of the request, or rolled back
        if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work bound to the request session."""
        return SessionUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subject_repository(self, session: AsyncSession) -> SubjectRepository:
        """Provide Subject repository."""
        return PostgresSubjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_answer_repository(
        self, session: AsyncSession
    ) -> UserAnswerRepository:
        """Provide UserAnswer repository."""
        return PostgresUserAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_membership_repository(self, session: AsyncSession) -> MembershipRepository:
        """Provide Membership repository."""
        return PostgresMembershipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_platform_settings_repository(
        self, session: AsyncSession
    ) -> PlatformSettingsRepository:
        """Provide PlatformSettings repository."""
        return PostgresPlatformSettingsRepository(session)
