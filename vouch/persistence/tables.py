"""SQLAlchemy table definitions for Vouch.

Tables owned by this service match the Alembic migrations. Tables owned by
other services (users, subjects, platform settings) are declared with the
columns read here only.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# EXTERNAL: ACCOUNT DIRECTORY
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("first_name", String(255), nullable=False, server_default=""),
    Column("last_name", String(255), nullable=False, server_default=""),
    Column("phone_number", String(50), nullable=True),
    Column("profile_domain", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# EXTERNAL: SUBJECTS
# ============================================================================
skills_table = Table(
    "skills",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
)

# A user's claimed skill; invitations point at this mapping row
user_skills_table = Table(
    "user_skills",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("skill_id", UUID, ForeignKey("skills.id"), nullable=False),
    Column("level", String(50), nullable=True),
    Column("experience", String(50), nullable=True),
)

employments_table = Table(
    "employments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("organization_name", String(255), nullable=False),
    Column("role", String(255), nullable=True),
    Column("from_date", String(7), nullable=True),  # YYYY-MM
    Column("to_date", String(7), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
)

client_projects_table = Table(
    "client_projects",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("role", String(255), nullable=True),
    Column("cost", String(50), nullable=True),
    Column("from_date", String(7), nullable=True),
    Column("to_date", String(7), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
)

projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("owner_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
)

teams_table = Table(
    "teams",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("owner_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("required_skills", postgresql.ARRAY(String(100)), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
)

platform_settings_table = Table(
    "platform_settings",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("invites", Integer, nullable=False),
    Column("skills", Integer, nullable=False),
    Column("project", Integer, nullable=False, server_default="0"),
    Column("education", Integer, nullable=False, server_default="0"),
    Column("certification", Integer, nullable=False, server_default="0"),
    Column("employment", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# INVITATIONS TABLE (all domains)
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("domain", String(32), nullable=False),
    # Subject for subject domains, inviter for connections
    Column("scope_id", UUID, nullable=False),
    Column("subject_id", UUID, nullable=True),
    Column(
        "invited_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "verifier_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("email", String(255), nullable=False),
    Column("first_name", String(255), nullable=False, server_default=""),
    Column("last_name", String(255), nullable=False, server_default=""),
    Column("designation", String(255), nullable=True),
    Column("comment", Text, nullable=True),
    Column("status", Boolean, nullable=False, server_default="true"),
    Column("is_verified", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_invitations_email_domain", invitations_table.c.email, invitations_table.c.domain)
Index("idx_invitations_scope", invitations_table.c.domain, invitations_table.c.scope_id)

# One live invitation per scope and email within a domain
Index(
    "idx_invitations_unique_active",
    invitations_table.c.domain,
    invitations_table.c.scope_id,
    invitations_table.c.email,
    unique=True,
    postgresql_where=invitations_table.c.is_deleted.is_(False),
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("notification_type", String(32), nullable=False),
    Column("type_id", UUID, nullable=True),
    Column("title", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column("is_viewed", Boolean, nullable=False, server_default="false"),
    Column("status", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# QUESTION BANK
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("domain", String(32), nullable=False),
    Column("question", Text, nullable=False),
    Column("field_name", String(100), nullable=True),
    Column(
        "parent_question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("weightage", Float, nullable=True),
    Column("status", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_domain", questions_table.c.domain)

answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("answer", Text, nullable=False),
    Column("value", Integer, nullable=True),
    Column("weight", Float, nullable=True),
    Column("type", String(32), nullable=False),
    Column("status", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

user_answers_table = Table(
    "user_answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("invited_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("verified_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("question_id", UUID, ForeignKey("questions.id"), nullable=False),
    Column("answer_id", UUID, ForeignKey("answers.id"), nullable=False),
    Column("domain", String(32), nullable=False),
    Column(
        "verification_id",
        UUID,
        ForeignKey("invitations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("answer_type", String(32), nullable=False),
    Column("value", Integer, nullable=True),
    Column("is_nps", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_user_answers_verification", user_answers_table.c.verification_id)

# ============================================================================
# MEMBERSHIPS TABLE
# ============================================================================
memberships_table = Table(
    "memberships",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("domain", String(32), nullable=False),
    # Project or team id, or the inviting user for connections
    Column("subject_id", UUID, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", String(32), nullable=False),
    Column("comment", Text, nullable=True),
    Column("status", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("domain", "subject_id", "user_id", name="uq_memberships_member"),
)
