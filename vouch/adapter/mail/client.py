"""Transactional mail client implementation.

Mails are rendered by the mail provider from named templates; this client only
posts the template name, recipient and variables.
"""

from dataclasses import dataclass
from typing import Any

import httpx
import logfire

from vouch.adapter.error import MailDeliveryError
from vouch.domain.service.mail_service import MailClient


class HttpMailClient(MailClient):
    """Mail client for an HTTP templated-mail API."""

    def __init__(
        self,
        api_url: str,
        sender: str,
        api_key: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize mail client.

        Args:
            api_url: Send endpoint of the mail provider
            sender: From address
            api_key: Provider API key, sent as a bearer token when set
            timeout: Request timeout in seconds
        """
        self.api_url = api_url
        self.sender = sender
        self.api_key = api_key
        self.timeout = timeout

    async def send(
        self, template: str, to: str, subject: str, context: dict[str, Any]
    ) -> None:
        """Send a templated mail.

        Raises:
            MailDeliveryError: If the provider rejects the mail or is unreachable
        """
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        body = {
            "from": self.sender,
            "to": to,
            "subject": subject,
            "template": template,
            "context": context,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url, json=body, headers=headers, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Mail provider HTTP error", template=template, error=str(e))
            raise MailDeliveryError(f"HTTP error sending mail: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Mail provider rejected mail",
                template=template,
                status_code=response.status_code,
                error=response.text,
            )
            raise MailDeliveryError(f"Mail rejected: {response.status_code}")


@dataclass
class SentMail:
    template: str
    to: str
    subject: str
    context: dict[str, Any]


class MockMailClient(MailClient):
    """Mock mail client for testing.

    Records mails instead of sending them. Set ``fail`` to make every send
    raise MailDeliveryError.
    """

    def __init__(self, fail: bool = False) -> None:
        self.sent: list[SentMail] = []
        self.fail = fail

    async def send(
        self, template: str, to: str, subject: str, context: dict[str, Any]
    ) -> None:
        if self.fail:
            raise MailDeliveryError("Mock mail failure")
        self.sent.append(SentMail(template=template, to=to, subject=subject, context=context))
