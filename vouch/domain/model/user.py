"""User entity.

Users are owned by the external account directory. The engine only reads
them to resolve invitees and to fill notification and mail templates.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vouch.domain.model.common import DomainModel
from vouch.domain.value import Email, PhoneNumber, UserId


class User(DomainModel):
    """Registered account."""

    id: UserId
    email: Email
    first_name: str
    last_name: str = ""
    phone_number: Optional[PhoneNumber] = None
    profile_domain: Optional[str] = None  # Professional domain, e.g. "Backend"
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
