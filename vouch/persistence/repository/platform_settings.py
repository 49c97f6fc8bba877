"""PostgreSQL implementation of PlatformSettings repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vouch.domain.model import PlatformSettings
from vouch.domain.repository import PlatformSettingsRepository
from vouch.persistence.mappers import row_to_platform_settings
from vouch.persistence.tables import platform_settings_table


class PostgresPlatformSettingsRepository(PlatformSettingsRepository):
    """Reads the newest active platform settings record."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_active(self) -> Optional[PlatformSettings]:
        stmt = (
            select(platform_settings_table)
            .where(platform_settings_table.c.is_active.is_(True))
            .order_by(platform_settings_table.c.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_platform_settings(dict(row)) if row else None
