"""Mail domain service."""

from abc import ABC, abstractmethod
from typing import Any

import logfire

from vouch.domain.model.invitation import Invitation
from vouch.domain.model.subject import Subject
from vouch.domain.model.user import User
from vouch.domain.value import DomainType

from .base import Service


class MailClient(ABC):
    """Port for the transactional mail provider."""

    @abstractmethod
    async def send(
        self, template: str, to: str, subject: str, context: dict[str, Any]
    ) -> None:
        """Send a templated mail.

        Args:
            template: Template name known to the mail provider
            to: Recipient address
            subject: Mail subject line
            context: Template variables

        Raises:
            MailDeliveryError: If the provider rejects the mail
        """
        pass


MAIL_TEMPLATES: dict[DomainType, tuple[str, str]] = {
    DomainType.SKILL: ("skill-verification", "Help verify a skill"),
    DomainType.EMPLOYMENT: ("employment-verification", "Help verify a job experience"),
    DomainType.CLIENT_PROJECT: ("client-project-verification", "Help verify a project"),
    DomainType.PROJECT: ("project-invite", "You have been invited to a project"),
    DomainType.TEAM: ("team-invite", "You have been invited to a team"),
    DomainType.CONNECTION: ("connection-invite", "You have a new connection request"),
}


class MailService(Service):
    """Builds invitation mails and hands them to the mail provider."""

    def __init__(self, mail_client: MailClient) -> None:
        self.mail_client = mail_client

    def build_invite_payload(
        self,
        invitation: Invitation,
        subject: Subject | None,
        inviter: User,
        verification_url: str,
    ) -> dict[str, Any]:
        """Build the template variables for an invitation mail.

        Every payload carries the invitee name, a comment or description, the
        inviter's contact details and the verification URL. Domains add their
        own subject fields on top.
        """
        payload: dict[str, Any] = {
            "name": invitation.name or invitation.email.root,
            "comment": invitation.comment or "",
            "invitedByName": inviter.full_name,
            "invitedByEmail": inviter.email.root,
            "invitedByPhoneNumber": (
                inviter.phone_number.formatted() if inviter.phone_number else ""
            ),
            "email": invitation.email.root,
            "verificationUrl": verification_url,
        }

        domain = invitation.domain
        if domain == DomainType.SKILL:
            payload.update(
                skillName=subject.name,
                level=subject.role or "",
                experience=subject.experience or "",
            )
        elif domain == DomainType.EMPLOYMENT:
            payload.update(
                organizationName=subject.name,
                role=subject.role or "",
                activeYears=(
                    f"{subject.active_from or ''} - {subject.active_to or 'PRESENT'}"
                ),
            )
        elif domain == DomainType.CLIENT_PROJECT:
            payload.update(
                projectName=subject.name,
                role=subject.role or "",
                projectCost=subject.cost or "",
            )
        elif domain == DomainType.TEAM:
            payload.update(
                teamName=subject.name,
                description=subject.description or "",
                requiredSkills=", ".join(subject.required_skills),
                designation=invitation.designation or "",
            )
        elif domain == DomainType.PROJECT:
            payload.update(
                projectName=subject.name,
                description=subject.description or "",
            )
        elif domain == DomainType.CONNECTION:
            payload.update(description=invitation.comment or "")

        return payload

    async def send_invite(
        self,
        invitation: Invitation,
        subject: Subject | None,
        inviter: User,
        verification_url: str,
    ) -> None:
        """Mail an invitee the link to verify or join.

        Raises:
            MailDeliveryError: If the provider rejects the mail
        """
        template, title = MAIL_TEMPLATES[invitation.domain]
        with logfire.span(
            "mail_service.send_invite",
            invitation_id=str(invitation.id),
            domain=invitation.domain.value,
            template=template,
        ):
            payload = self.build_invite_payload(
                invitation, subject, inviter, verification_url
            )
            await self.mail_client.send(
                template=template,
                to=invitation.email.root,
                subject=title,
                context=payload,
            )
            logfire.info(
                "Invitation mail sent",
                invitation_id=str(invitation.id),
                template=template,
            )
