"""Platform settings read model."""

from vouch.domain.model.common import DomainModel


class PlatformSettings(DomainModel):
    """Admin-managed platform limits."""

    invites: int
    skills: int
    project: int = 0
    education: int = 0
    certification: int = 0
    employment: int = 0
