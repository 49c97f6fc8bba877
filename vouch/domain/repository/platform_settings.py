"""Platform settings repository interface."""

from abc import ABC, abstractmethod

from vouch.domain.model.platform_settings import PlatformSettings


class PlatformSettingsRepository(ABC):
    """Read access to the admin-managed platform settings record."""

    @abstractmethod
    async def get_active(self) -> PlatformSettings | None:
        """Fetch the current platform settings, if any have been configured."""
        pass
