"""Strongly typed identifiers for Vouch domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
SubjectId = NewType("SubjectId", UUID)
NotificationId = NewType("NotificationId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
UserAnswerId = NewType("UserAnswerId", UUID)
MembershipId = NewType("MembershipId", UUID)
