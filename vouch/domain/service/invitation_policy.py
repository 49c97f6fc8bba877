"""Per-domain invitation rules.

Every domain runs through the same workflow. What differs between them is
captured here, keyed by DomainType.
"""

from dataclasses import dataclass
from enum import Enum

from vouch.domain.value import DomainType


class InviteLimit(str, Enum):
    """Where a domain's invitation limit comes from."""

    NONE = "none"
    SKILL_SETTING = "skill_setting"  # InvitationSettings.skill_verifier_limit
    PLATFORM_INVITES = "platform_invites"  # PlatformSettings.invites


GATE_FIELDS = ("userName", "position", "employmentDates")


@dataclass(frozen=True)
class DomainPolicy:
    """Rules for one invitation domain."""

    domain: DomainType
    subject_resource: str | None
    subject_not_found_message: str | None = None
    single_verifier: bool = False
    limit: InviteLimit = InviteLimit.NONE
    gate_fields: tuple[str, ...] = ()
    already_member_message: str | None = None

    @property
    def has_subject(self) -> bool:
        return self.subject_resource is not None


POLICIES: dict[DomainType, DomainPolicy] = {
    DomainType.SKILL: DomainPolicy(
        domain=DomainType.SKILL,
        subject_resource="Skill",
        subject_not_found_message="Skill information not found.",
        limit=InviteLimit.SKILL_SETTING,
    ),
    DomainType.EMPLOYMENT: DomainPolicy(
        domain=DomainType.EMPLOYMENT,
        subject_resource="Employment",
        subject_not_found_message="Employment record not found.",
        single_verifier=True,
        gate_fields=GATE_FIELDS,
    ),
    DomainType.CLIENT_PROJECT: DomainPolicy(
        domain=DomainType.CLIENT_PROJECT,
        subject_resource="Client project",
        subject_not_found_message="Client project record not found.",
        single_verifier=True,
        gate_fields=GATE_FIELDS,
    ),
    DomainType.PROJECT: DomainPolicy(
        domain=DomainType.PROJECT,
        subject_resource="Project",
        subject_not_found_message="Project information not found.",
        already_member_message="Project invite already accepted",
    ),
    DomainType.TEAM: DomainPolicy(
        domain=DomainType.TEAM,
        subject_resource="Team",
        subject_not_found_message="Team record not found.",
        already_member_message="Team invite already accepted",
    ),
    DomainType.CONNECTION: DomainPolicy(
        domain=DomainType.CONNECTION,
        subject_resource=None,
        limit=InviteLimit.PLATFORM_INVITES,
        already_member_message="User is already connected with this email.",
    ),
}


def policy_for(domain: DomainType) -> DomainPolicy:
    return POLICIES[domain]
