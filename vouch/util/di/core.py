"""Configuration providers."""

from dishka import Scope, provide

from vouch.config import AuthSettings, Settings
from vouch.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per process from the environment and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth
