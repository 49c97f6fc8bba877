"""Domain value objects for Vouch.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from vouch.domain.value.common import RootValueObject


class DomainType(str, Enum):
    """Domain an invitation belongs to.

    The wire value of SKILL is ``SKILLS``; it appears verbatim in
    verification URLs consumed by the frontend.
    """

    SKILL = "SKILLS"
    EMPLOYMENT = "EMPLOYMENT"
    CLIENT_PROJECT = "CLIENT_PROJECT"
    PROJECT = "PROJECT"
    TEAM = "TEAM"
    CONNECTION = "CONNECTION"

    @property
    def label(self) -> str:
        """Human readable form used in notification templates."""
        return self.value.lower().replace("_", " ")

    @property
    def is_verification(self) -> bool:
        """Whether the invitee answers a questionnaire."""
        return self in VERIFICATION_DOMAINS

    @property
    def is_membership(self) -> bool:
        """Whether the invitee accepts a membership."""
        return self in MEMBERSHIP_DOMAINS


VERIFICATION_DOMAINS = frozenset(
    {DomainType.SKILL, DomainType.EMPLOYMENT, DomainType.CLIENT_PROJECT}
)
MEMBERSHIP_DOMAINS = frozenset(
    {DomainType.PROJECT, DomainType.TEAM, DomainType.CONNECTION}
)


class AnswerType(str, Enum):
    """Kind of answer a question accepts."""

    RATING = "RATING"
    BOOLEAN = "BOOLEAN"
    CUSTOM = "CUSTOM"
    OPTION = "OPTION"


class MembershipRole(str, Enum):
    """Role recorded on a membership mapping."""

    ACCEPTED = "ACCEPTED"


class VerificationOutcome(str, Enum):
    """Result of submitting a questionnaire.

    FAILED is reported to the caller only; it is never stored on the
    invitation, which stays unverified.
    """

    VERIFIED = "VERIFIED"
    FAILED = "FAILED"


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase without surrounding whitespace."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and sanity check the address."""
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError(f"Invalid email address: {v}")
        return v


class PhoneNumber(RootValueObject[str]):
    """Phone number as entered by the user."""

    def formatted(self) -> str:
        """Format North American numbers as ``+1(XXX)XXX-XXXX``.

        Numbers that do not have 10 digits (or 11 with a leading 1) are
        returned unchanged.
        """
        digits = re.sub(r"\D", "", self.root)
        match = re.match(r"^1?(\d{3})(\d{3})(\d{4})$", digits)
        if not match:
            return self.root
        return f"+1({match.group(1)}){match.group(2)}-{match.group(3)}"
