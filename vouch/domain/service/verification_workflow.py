"""Verification workflow domain service.

Drives invitations through their lifecycle in every domain: sending,
answering a verification questionnaire, accepting a membership and revoking
a connection request.
"""

from datetime import datetime, timedelta
from typing import Any
from urllib.parse import quote
from uuid import uuid4

import logfire
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from vouch.config import Settings
from vouch.domain.error import (
    AlreadyMemberError,
    AlreadyVerifiedError,
    DuplicateInviteeError,
    InvalidVerificationIdError,
    InvitationLimitError,
    InvitationNotFoundError,
    NotAuthorizedError,
    OneVerifierOnlyError,
    PlatformSettingsNotFoundError,
    RevokeNotAllowedError,
    SelfInviteError,
    SubjectNotFoundError,
    ValidationError,
)
from vouch.domain.model.invitation import Invitation
from vouch.domain.model.membership import Membership
from vouch.domain.model.subject import Subject
from vouch.domain.model.user import User
from vouch.domain.repository import (
    InvitationRepository,
    MembershipRepository,
    PlatformSettingsRepository,
    SubjectRepository,
    UnitOfWork,
    UserAnswerRepository,
)
from vouch.domain.value import (
    DomainType,
    Email,
    InvitationId,
    MembershipId,
    MembershipRole,
    NotificationId,
    SubjectId,
    UserId,
    VerificationOutcome,
)
from vouch.util.best_effort import log_and_continue

from .base import Service
from .invitation_policy import DomainPolicy, InviteLimit, policy_for
from .mail_service import MailService
from .notification_service import NotificationService
from .question_service import QuestionService, VerificationQuestion
from .reputation_service import ReputationService
from .user_service import UserService


class InviteeDetails(BaseModel):
    """Person to invite."""

    email: str
    first_name: str = ""
    last_name: str = ""
    designation: str | None = None
    comment: str | None = None


class SentInvitation(BaseModel):
    """Invitation as returned to the inviter."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    invitation: Invitation
    verification_url: str
    notification_id: NotificationId | None = None


class VerificationAttempt(BaseModel):
    """Result of submitting a questionnaire."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    invitation: Invitation
    outcome: VerificationOutcome


def build_verification_url(
    frontend_url: str,
    invitation: Invitation,
    notification_id: NotificationId | None,
) -> str:
    """Link the invitee follows to start verifying or to join.

    Registered invitees are sent to the login form, everyone else to signup.
    """
    redirect = "login" if invitation.is_registered else "signup"
    return (
        f"{frontend_url}/verify?redirectUrl={redirect}"
        f"&invitedBy={invitation.invited_by}"
        f"&email={quote(invitation.email.root, safe='@')}"
        f"&id={invitation.id}"
        f"&type={invitation.domain.value}"
        f"&notificationId={notification_id or ''}"
    )


def _is_confirmed(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).lower() == "true"


class VerificationWorkflow(Service):
    """Domain service for the invitation and verification workflow."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        subject_repository: SubjectRepository,
        membership_repository: MembershipRepository,
        user_answer_repository: UserAnswerRepository,
        platform_settings_repository: PlatformSettingsRepository,
        unit_of_work: UnitOfWork,
        user_service: UserService,
        question_service: QuestionService,
        notification_service: NotificationService,
        mail_service: MailService,
        reputation_service: ReputationService,
        settings: Settings,
    ) -> None:
        self.invitation_repository = invitation_repository
        self.subject_repository = subject_repository
        self.membership_repository = membership_repository
        self.user_answer_repository = user_answer_repository
        self.platform_settings_repository = platform_settings_repository
        self.unit_of_work = unit_of_work
        self.user_service = user_service
        self.question_service = question_service
        self.notification_service = notification_service
        self.mail_service = mail_service
        self.reputation_service = reputation_service
        self.settings = settings

    async def send_invite(
        self,
        domain: DomainType,
        subject_id: SubjectId | None,
        inviter_id: UserId,
        invitees: list[InviteeDetails],
    ) -> list[SentInvitation]:
        """Invite one or more people to verify or join a subject.

        All invitations are stored in one transaction. Notifications, mails
        and the reputation trigger run afterwards and never fail the call.

        Args:
            domain: Invitation domain
            subject_id: Subject being verified or joined (None for connections)
            inviter_id: User sending the invitations
            invitees: People to invite

        Returns:
            Sent invitations with their verification URLs

        Raises:
            SelfInviteError: If the inviter invites their own email
            SubjectNotFoundError: If the subject does not exist
            NotAuthorizedError: If the inviter does not own the subject
            DuplicateInviteeError: If an email is repeated or already invited
            OneVerifierOnlyError: If a single-verifier subject is over-invited
            InvitationLimitError: If the domain's limit would be exceeded
            AlreadyMemberError: If a connection already exists
        """
        policy = policy_for(domain)

        with logfire.span(
            "verification_workflow.send_invite",
            domain=domain.value,
            inviter_id=str(inviter_id),
            invitee_count=len(invitees),
        ):
            if not invitees:
                raise ValidationError("At least one invitee is required.")

            inviter = await self.user_service.get_user(inviter_id)
            emails = [self._parse_email(invitee.email) for invitee in invitees]

            if inviter.email in emails:
                logfire.warn("Self invite rejected", inviter_id=str(inviter_id))
                raise SelfInviteError()

            subject = await self._load_owned_subject(policy, subject_id, inviter)

            repeated = sorted({e.root for e in emails if emails.count(e) > 1})
            if repeated:
                raise DuplicateInviteeError(
                    repeated, message="Duplicate members cannot be added."
                )

            scope_id = subject.id if subject else inviter.id
            existing = await self.invitation_repository.find_active_by_scope(
                domain, scope_id
            )

            if policy.single_verifier and (existing or len(emails) > 1):
                logfire.warn(
                    "Single verifier domain already invited",
                    domain=domain.value,
                    subject_id=str(scope_id),
                )
                raise OneVerifierOnlyError()

            already_invited = sorted(
                {e.root for e in emails} & {i.email.root for i in existing}
            )
            if already_invited:
                logfire.warn(
                    "Duplicate invitation rejected",
                    domain=domain.value,
                    emails=already_invited,
                )
                raise DuplicateInviteeError(already_invited)

            limit = await self._limit_for(policy)
            if limit is not None and len(existing) + len(emails) > limit:
                logfire.warn(
                    "Invitation limit exceeded",
                    domain=domain.value,
                    existing=len(existing),
                    requested=len(emails),
                    limit=limit,
                )
                raise InvitationLimitError(limit)

            resolved: dict[Email, User | None] = {}
            for email in emails:
                resolved[email] = await self.user_service.find_user_by_email(email)

            if domain == DomainType.CONNECTION:
                await self._ensure_not_connected(policy, inviter, resolved.values())

            now = datetime.now()
            invitations = [
                Invitation(
                    id=InvitationId(uuid4()),
                    domain=domain,
                    subject_id=subject.id if subject else None,
                    invited_by=inviter.id,
                    verifier_id=resolved[email].id if resolved[email] else None,
                    email=email,
                    first_name=invitee.first_name,
                    last_name=invitee.last_name,
                    designation=invitee.designation,
                    comment=invitee.comment,
                    created_at=now,
                )
                for email, invitee in zip(emails, invitees)
            ]

            try:
                async with self.unit_of_work.transaction():
                    saved = await self.invitation_repository.save_many(invitations)
            except IntegrityError:
                logfire.warn(
                    "Concurrent duplicate invitation", domain=domain.value
                )
                raise DuplicateInviteeError()

            logfire.info(
                "Invitations created",
                domain=domain.value,
                inviter_id=str(inviter.id),
                count=len(saved),
            )

            sent = [
                await self._announce(invitation, subject, inviter)
                for invitation in saved
            ]

            if domain.is_verification:
                await self.reputation_service.trigger_update(inviter.id)

            return sent

    async def get_verification_questions(
        self,
        invitation_id: InvitationId,
        verifier_id: UserId,
        domain: DomainType | None = None,
    ) -> list[VerificationQuestion]:
        """Load the questionnaire for an invitation addressed to the caller.

        Raises:
            InvalidVerificationIdError: If the invitation is unknown, deleted,
                of another domain, or addressed to someone else
        """
        with logfire.span(
            "verification_workflow.get_verification_questions",
            invitation_id=str(invitation_id),
            verifier_id=str(verifier_id),
        ):
            invitation = await self._load_for_verifier(invitation_id, verifier_id, domain)
            subject = await self._load_subject(invitation)
            owner = await self.user_service.get_user(invitation.invited_by)
            return await self.question_service.build_questionnaire(
                invitation.domain, owner, subject
            )

    async def verify_answers(
        self,
        invitation_id: InvitationId,
        verifier_id: UserId,
        answers: dict[str, Any],
        domain: DomainType | None = None,
    ) -> VerificationAttempt:
        """Record a verifier's answers and mark the invitation verified.

        For domains with gate fields, any gate answered with something other
        than true fails the verification: the owner is notified and the
        invitation is returned unchanged.

        Args:
            invitation_id: Invitation being answered
            verifier_id: Caller, who must be the invitation's verifier
            answers: Submitted values keyed by question field name
            domain: Expected domain, if the caller knows it

        Returns:
            The invitation and whether it was verified

        Raises:
            InvalidVerificationIdError: If the invitation is not the caller's
            AlreadyVerifiedError: If the invitation is already verified
            InvalidAnswerError: If an answer does not match its options
        """
        with logfire.span(
            "verification_workflow.verify_answers",
            invitation_id=str(invitation_id),
            verifier_id=str(verifier_id),
        ):
            invitation = await self._load_for_verifier(invitation_id, verifier_id, domain)
            if invitation.is_verified:
                logfire.warn("Invitation already verified", invitation_id=str(invitation_id))
                raise AlreadyVerifiedError()

            policy = policy_for(invitation.domain)
            subject = await self._load_subject(invitation)
            verifier = await self.user_service.get_user(verifier_id)

            failed_gates = [
                field
                for field in policy.gate_fields
                if not _is_confirmed(answers.get(field))
            ]
            if failed_gates:
                logfire.info(
                    "Verification failed",
                    invitation_id=str(invitation.id),
                    failed_fields=failed_gates,
                )
                await self.notification_service.send_failed_notification(
                    invitation, subject, verifier
                )
                return VerificationAttempt(
                    invitation=invitation, outcome=VerificationOutcome.FAILED
                )

            user_answers = await self.question_service.resolve_answers(
                invitation, verifier_id, answers, skip_fields=policy.gate_fields
            )
            verified = invitation.mark_verified(verifier_id)

            async with self.unit_of_work.transaction():
                await self.user_answer_repository.save_many(user_answers)
                saved = await self.invitation_repository.save(verified)

            logfire.info(
                "Invitation verified",
                invitation_id=str(saved.id),
                domain=saved.domain.value,
                answer_count=len(user_answers),
            )

            await self.notification_service.send_verified_notification(
                saved, subject, verifier
            )
            await self.reputation_service.trigger_update(saved.invited_by)
            await self.reputation_service.trigger_verifier_update(saved.invited_by)

            return VerificationAttempt(
                invitation=saved, outcome=VerificationOutcome.VERIFIED
            )

    async def accept_invite(
        self, invitation_id: InvitationId, user_id: UserId
    ) -> Membership:
        """Accept a project, team or connection invitation.

        The membership and the accepted invitation are written in one
        transaction; the inviter is notified after it commits.

        Args:
            invitation_id: Invitation to accept
            user_id: Accepting user

        Returns:
            The new membership

        Raises:
            InvitationNotFoundError: If the invitation is unknown or not a
                membership invitation
            NotAuthorizedError: If the invitation is addressed to someone else
            SubjectNotFoundError: If the project or team no longer exists
            AlreadyMemberError: If the user already accepted
        """
        with logfire.span(
            "verification_workflow.accept_invite",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if (
                not invitation
                or invitation.is_deleted
                or not invitation.domain.is_membership
            ):
                raise InvitationNotFoundError(str(invitation_id))

            policy = policy_for(invitation.domain)
            member = await self.user_service.get_user(user_id)
            self._ensure_addressee(invitation, member)

            subject = await self._load_subject(invitation) if policy.has_subject else None
            membership_subject = subject.id if subject else invitation.invited_by

            if invitation.is_verified or await self.membership_repository.exists(
                invitation.domain, membership_subject, member.id
            ):
                logfire.warn(
                    "Invitation already accepted", invitation_id=str(invitation_id)
                )
                raise AlreadyMemberError(policy.already_member_message)

            membership = Membership(
                id=MembershipId(uuid4()),
                domain=invitation.domain,
                subject_id=membership_subject,
                user_id=member.id,
                role=MembershipRole.ACCEPTED,
                comment=invitation.comment,
                created_at=datetime.now(),
            )
            accepted = invitation.mark_verified(member.id)

            try:
                async with self.unit_of_work.transaction():
                    saved = await self.membership_repository.save(membership)
                    await self.invitation_repository.save(accepted)
            except IntegrityError:
                raise AlreadyMemberError(policy.already_member_message)

            logfire.info(
                "Invitation accepted",
                invitation_id=str(invitation_id),
                domain=invitation.domain.value,
                membership_id=str(saved.id),
            )

            await self.notification_service.send_accepted_notification(
                accepted, subject, member
            )
            return saved

    async def revoke_invite(
        self, invitation_id: InvitationId, user_id: UserId
    ) -> Invitation:
        """Withdraw a connection request that has not been accepted yet.

        Raises:
            InvitationNotFoundError: If the invitation is unknown or deleted
            NotAuthorizedError: If the caller did not send it
            RevokeNotAllowedError: If it was accepted, is not a connection
                request, or is older than the revoke window
        """
        with logfire.span(
            "verification_workflow.revoke_invite",
            invitation_id=str(invitation_id),
            user_id=str(user_id),
        ):
            invitation = await self.invitation_repository.find_by_id(invitation_id)
            if not invitation or invitation.is_deleted:
                raise InvitationNotFoundError(str(invitation_id))
            if invitation.invited_by != user_id:
                raise NotAuthorizedError("invitation", str(invitation_id), str(user_id))

            window = timedelta(days=self.settings.invitations.revoke_window_days)
            age = datetime.now(invitation.created_at.tzinfo) - invitation.created_at
            if (
                invitation.domain != DomainType.CONNECTION
                or invitation.is_verified
                or age > window
            ):
                raise RevokeNotAllowedError()

            async with self.unit_of_work.transaction():
                revoked = await self.invitation_repository.save(invitation.soft_delete())

            logfire.info("Invitation revoked", invitation_id=str(invitation_id))
            return revoked

    async def _announce(
        self, invitation: Invitation, subject: Subject | None, inviter: User
    ) -> SentInvitation:
        notification = await self.notification_service.send_invitation_notification(
            invitation, subject, inviter
        )
        notification_id = notification.id if notification else None
        url = build_verification_url(
            self.settings.api.frontend_url, invitation, notification_id
        )

        async with log_and_continue(
            "mail.send_invite", invitation_id=str(invitation.id)
        ):
            await self.mail_service.send_invite(invitation, subject, inviter, url)

        return SentInvitation(
            invitation=invitation,
            verification_url=url,
            notification_id=notification_id,
        )

    async def _load_owned_subject(
        self, policy: DomainPolicy, subject_id: SubjectId | None, owner: User
    ) -> Subject | None:
        if not policy.has_subject:
            return None
        subject = (
            await self.subject_repository.find_by_id(policy.domain, subject_id)
            if subject_id is not None
            else None
        )
        if not subject:
            raise SubjectNotFoundError(
                policy.subject_resource,
                str(subject_id),
                message=policy.subject_not_found_message,
            )
        if subject.owner_id != owner.id:
            logfire.warn(
                "Invitation for subject not owned by inviter",
                subject_id=str(subject_id),
                user_id=str(owner.id),
            )
            raise NotAuthorizedError(
                policy.subject_resource.lower(), str(subject_id), str(owner.id)
            )
        return subject

    async def _load_subject(self, invitation: Invitation) -> Subject:
        policy = policy_for(invitation.domain)
        subject = None
        if invitation.subject_id is not None:
            subject = await self.subject_repository.find_by_id(
                invitation.domain, invitation.subject_id
            )
        if not subject:
            raise SubjectNotFoundError(
                policy.subject_resource or "Subject",
                str(invitation.subject_id),
                message=policy.subject_not_found_message,
            )
        return subject

    async def _load_for_verifier(
        self,
        invitation_id: InvitationId,
        verifier_id: UserId,
        domain: DomainType | None,
    ) -> Invitation:
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if (
            not invitation
            or invitation.is_deleted
            or not invitation.domain.is_verification
            or (domain is not None and invitation.domain != domain)
            or invitation.verifier_id != verifier_id
        ):
            logfire.warn(
                "Invalid verification id",
                invitation_id=str(invitation_id),
                verifier_id=str(verifier_id),
            )
            raise InvalidVerificationIdError()
        return invitation

    async def _limit_for(self, policy: DomainPolicy) -> int | None:
        if policy.limit == InviteLimit.SKILL_SETTING:
            return self.settings.invitations.skill_verifier_limit
        if policy.limit == InviteLimit.PLATFORM_INVITES:
            platform_settings = await self.platform_settings_repository.get_active()
            if not platform_settings:
                raise PlatformSettingsNotFoundError()
            return platform_settings.invites
        return None

    async def _ensure_not_connected(
        self, policy: DomainPolicy, inviter: User, invitees
    ) -> None:
        for invitee in invitees:
            if invitee is None:
                continue
            if await self.membership_repository.exists(
                DomainType.CONNECTION, inviter.id, invitee.id
            ) or await self.membership_repository.exists(
                DomainType.CONNECTION, invitee.id, inviter.id
            ):
                raise AlreadyMemberError(policy.already_member_message)

    @staticmethod
    def _ensure_addressee(invitation: Invitation, member: User) -> None:
        if invitation.verifier_id is not None:
            addressed = invitation.verifier_id == member.id
        else:
            addressed = invitation.email == member.email
        if not addressed:
            raise NotAuthorizedError("invitation", str(invitation.id), str(member.id))

    @staticmethod
    def _parse_email(raw: str) -> Email:
        try:
            return Email(root=raw)
        except PydanticValidationError:
            raise ValidationError(f"Invalid email address: {raw}")
