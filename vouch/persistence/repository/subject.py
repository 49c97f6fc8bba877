"""PostgreSQL implementation of Subject repository."""

from typing import Any, Callable, Dict, Optional

from sqlalchemy import Select, and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from vouch.domain.model import Subject
from vouch.domain.repository import SubjectRepository
from vouch.domain.value import DomainType, SubjectId
from vouch.persistence.mappers import (
    client_project_row_to_subject,
    employment_row_to_subject,
    project_row_to_subject,
    team_row_to_subject,
    user_skill_row_to_subject,
)
from vouch.persistence.tables import (
    client_projects_table,
    employments_table,
    projects_table,
    skills_table,
    teams_table,
    user_skills_table,
)


def _skill_query(subject_id: SubjectId) -> Select:
    return (
        select(user_skills_table, skills_table.c.name)
        .join(skills_table, skills_table.c.id == user_skills_table.c.skill_id)
        .where(user_skills_table.c.id == subject_id)
    )


def _employment_query(subject_id: SubjectId) -> Select:
    return select(employments_table).where(
        and_(
            employments_table.c.id == subject_id,
            employments_table.c.is_deleted.is_(False),
        )
    )


def _client_project_query(subject_id: SubjectId) -> Select:
    return select(client_projects_table).where(
        and_(
            client_projects_table.c.id == subject_id,
            client_projects_table.c.is_deleted.is_(False),
        )
    )


def _project_query(subject_id: SubjectId) -> Select:
    return select(projects_table).where(
        and_(projects_table.c.id == subject_id, projects_table.c.is_deleted.is_(False))
    )


def _team_query(subject_id: SubjectId) -> Select:
    return select(teams_table).where(
        and_(teams_table.c.id == subject_id, teams_table.c.is_deleted.is_(False))
    )


SUBJECT_SOURCES: dict[
    DomainType,
    tuple[Callable[[SubjectId], Select], Callable[[Dict[str, Any]], Subject]],
] = {
    DomainType.SKILL: (_skill_query, user_skill_row_to_subject),
    DomainType.EMPLOYMENT: (_employment_query, employment_row_to_subject),
    DomainType.CLIENT_PROJECT: (_client_project_query, client_project_row_to_subject),
    DomainType.PROJECT: (_project_query, project_row_to_subject),
    DomainType.TEAM: (_team_query, team_row_to_subject),
}


class PostgresSubjectRepository(SubjectRepository):
    """Reads subjects from the table that owns each domain's records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, domain: DomainType, subject_id: SubjectId
    ) -> Optional[Subject]:
        source = SUBJECT_SOURCES.get(domain)
        if source is None:
            return None
        query, mapper = source
        result = await self.session.execute(query(subject_id))
        row = result.mappings().first()
        return mapper(dict(row)) if row else None
