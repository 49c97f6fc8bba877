"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vouch.domain.model.common import DomainModel
from vouch.domain.value import DomainType, InvitationId, NotificationId, UserId


class Notification(DomainModel):
    """In-app notification for a single recipient.

    Created when an invitation changes state and mutated afterwards only by its
    recipient. ``status`` False means the recipient removed it; rows are never
    hard-deleted.
    """

    id: NotificationId
    user_id: UserId
    notification_type: DomainType
    type_id: Optional[InvitationId] = None
    title: str
    message: str
    is_viewed: bool = False
    status: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
