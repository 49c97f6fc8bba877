"""PostgreSQL unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from vouch.domain.repository import UnitOfWork


class SessionUnitOfWork(UnitOfWork):
    """Commits or rolls back the request session around a block of writes.

    The session starts a new transaction on its next statement, so writes
    after the block (notifications, for example) are independent of it.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            yield
            await self.session.commit()
        except Exception as e:
            logfire.warn("Transaction rollback", error=str(e))
            await self.session.rollback()
            raise
