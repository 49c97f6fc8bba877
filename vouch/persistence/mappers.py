"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from vouch.domain.model import (
    Answer,
    Invitation,
    Membership,
    Notification,
    PlatformSettings,
    Question,
    Subject,
    User,
    UserAnswer,
)
from vouch.domain.value import (
    AnswerId,
    AnswerType,
    DomainType,
    Email,
    InvitationId,
    MembershipId,
    MembershipRole,
    NotificationId,
    PhoneNumber,
    QuestionId,
    SubjectId,
    UserId,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(root=row["email"]),
        first_name=row["first_name"],
        last_name=row.get("last_name") or "",
        phone_number=(
            PhoneNumber(root=row["phone_number"]) if row.get("phone_number") else None
        ),
        profile_domain=row.get("profile_domain"),
        created_at=row["created_at"],
    )


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    subject_id = _uuid(row.get("subject_id"))
    verifier_id = _uuid(row.get("verifier_id"))
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        domain=DomainType(row["domain"]),
        subject_id=SubjectId(subject_id) if subject_id else None,
        invited_by=UserId(_uuid(row["invited_by"])),
        verifier_id=UserId(verifier_id) if verifier_id else None,
        email=Email(root=row["email"]),
        first_name=row.get("first_name") or "",
        last_name=row.get("last_name") or "",
        designation=row.get("designation"),
        comment=row.get("comment"),
        status=row["status"],
        is_verified=row["is_verified"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    The unique index works on ``scope_id``, which is derived from the model
    and stored alongside it.
    """
    data = invitation.model_dump()
    data["domain"] = invitation.domain.value
    data["scope_id"] = invitation.scope_id
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    type_id = _uuid(row.get("type_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        notification_type=DomainType(row["notification_type"]),
        type_id=InvitationId(type_id) if type_id else None,
        title=row["title"],
        message=row["message"],
        is_viewed=row["is_viewed"],
        status=row["status"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    data = notification.model_dump()
    data["notification_type"] = notification.notification_type.value
    return data


def row_to_answer(row: Dict[str, Any]) -> Answer:
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        answer=row["answer"],
        value=row.get("value"),
        weight=row.get("weight"),
        type=AnswerType(row["type"]),
        created_at=row["created_at"],
    )


def row_to_question(row: Dict[str, Any], answers: list[Answer]) -> Question:
    """Convert a question row and its answers to a Question domain model.

    Args:
        row: Question row as dict
        answers: Answers already mapped for this question

    Returns:
        Question domain model
    """
    parent_id = _uuid(row.get("parent_question_id"))
    return Question(
        id=QuestionId(_uuid(row["id"])),
        domain=DomainType(row["domain"]),
        question=row["question"],
        field_name=row.get("field_name"),
        parent_question_id=QuestionId(parent_id) if parent_id else None,
        weightage=row.get("weightage"),
        status=row["status"],
        created_at=row["created_at"],
        answers=answers,
    )


def row_to_user_answer(row: Dict[str, Any]) -> UserAnswer:
    return UserAnswer(
        id=_uuid(row["id"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        verified_by=UserId(_uuid(row["verified_by"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        domain=DomainType(row["domain"]),
        verification_id=InvitationId(_uuid(row["verification_id"])),
        answer_type=AnswerType(row["answer_type"]),
        value=row.get("value"),
        is_nps=row["is_nps"],
        created_at=row["created_at"],
    )


def user_answer_to_dict(user_answer: UserAnswer) -> Dict[str, Any]:
    data = user_answer.model_dump()
    data["domain"] = user_answer.domain.value
    data["answer_type"] = user_answer.answer_type.value
    return data


def row_to_membership(row: Dict[str, Any]) -> Membership:
    return Membership(
        id=MembershipId(_uuid(row["id"])),
        domain=DomainType(row["domain"]),
        subject_id=_uuid(row["subject_id"]),
        user_id=UserId(_uuid(row["user_id"])),
        role=MembershipRole(row["role"]),
        comment=row.get("comment"),
        status=row["status"],
        created_at=row["created_at"],
    )


def membership_to_dict(membership: Membership) -> Dict[str, Any]:
    data = membership.model_dump()
    data["domain"] = membership.domain.value
    data["role"] = membership.role.value
    return data


def row_to_platform_settings(row: Dict[str, Any]) -> PlatformSettings:
    return PlatformSettings(
        invites=row["invites"],
        skills=row["skills"],
        project=row.get("project") or 0,
        education=row.get("education") or 0,
        certification=row.get("certification") or 0,
        employment=row.get("employment") or 0,
    )


# ----------------------------------------------------------------------------
# Subjects: one mapper per source table
# ----------------------------------------------------------------------------


def user_skill_row_to_subject(row: Dict[str, Any]) -> Subject:
    """Map a ``user_skills`` row joined with ``skills.name``."""
    return Subject(
        id=SubjectId(_uuid(row["id"])),
        domain=DomainType.SKILL,
        owner_id=UserId(_uuid(row["user_id"])),
        name=row["name"],
        role=row.get("level"),
        experience=row.get("experience"),
    )


def employment_row_to_subject(row: Dict[str, Any]) -> Subject:
    return Subject(
        id=SubjectId(_uuid(row["id"])),
        domain=DomainType.EMPLOYMENT,
        owner_id=UserId(_uuid(row["user_id"])),
        name=row["organization_name"],
        role=row.get("role"),
        active_from=row.get("from_date"),
        active_to=row.get("to_date"),
    )


def client_project_row_to_subject(row: Dict[str, Any]) -> Subject:
    return Subject(
        id=SubjectId(_uuid(row["id"])),
        domain=DomainType.CLIENT_PROJECT,
        owner_id=UserId(_uuid(row["user_id"])),
        name=row["name"],
        role=row.get("role"),
        cost=row.get("cost"),
        active_from=row.get("from_date"),
        active_to=row.get("to_date"),
    )


def project_row_to_subject(row: Dict[str, Any]) -> Subject:
    return Subject(
        id=SubjectId(_uuid(row["id"])),
        domain=DomainType.PROJECT,
        owner_id=UserId(_uuid(row["owner_id"])),
        name=row["name"],
        description=row.get("description"),
    )


def team_row_to_subject(row: Dict[str, Any]) -> Subject:
    return Subject(
        id=SubjectId(_uuid(row["id"])),
        domain=DomainType.TEAM,
        owner_id=UserId(_uuid(row["owner_id"])),
        name=row["name"],
        description=row.get("description"),
        required_skills=list(row.get("required_skills") or []),
    )
