"""Async engine and sessions for the Vouch PostgreSQL database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from vouch.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine over asyncpg, pooled per ``settings.database``.

    SQL is echoed when ``settings.debug`` is on.
    """
    database = settings.database
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories return detached domain models, so expiring on commit buys nothing
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
