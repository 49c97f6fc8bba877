"""Mail infrastructure providers."""

from dishka import Scope, provide

from vouch.adapter.mail import HttpMailClient
from vouch.config import Settings
from vouch.domain.service import MailClient
from vouch.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_client(self, settings: Settings) -> MailClient:
        """Provide HTTP mail client.

        Raises:
            ValueError: If the mail API key is missing outside development
        """
        if not settings.mail.api_key and settings.environment in ("staging", "production"):
            raise ValueError("Mail API key must be configured")

        return HttpMailClient(
            api_url=settings.mail.api_url,
            sender=settings.mail.sender,
            api_key=settings.mail.api_key,
            timeout=settings.mail.timeout_seconds,
        )
