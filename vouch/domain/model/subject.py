"""Subject read model.

A subject is the thing an invitation is about: a user's skill mapping, an
employment record, a client project, a project or a team. Subjects live in
tables owned by other services; this model carries only the fields the
workflow and its templates need.
"""

from typing import Optional

from vouch.domain.model.common import DomainModel
from vouch.domain.value import DomainType, SubjectId, UserId


class Subject(DomainModel):
    """Entity being verified or joined."""

    id: SubjectId
    domain: DomainType
    owner_id: UserId
    name: str  # Skill name, organization name, project or team name
    role: Optional[str] = None  # Position held, or skill level
    active_from: Optional[str] = None  # "YYYY-MM"
    active_to: Optional[str] = None  # "YYYY-MM", None while ongoing
    description: Optional[str] = None
    experience: Optional[str] = None
    required_skills: list[str] = []
    cost: Optional[str] = None

    def active_range(self) -> str:
        """Render the active period for display."""
        end = self.active_to or "present"
        return f"{self.active_from or ''} to {end}".strip()
