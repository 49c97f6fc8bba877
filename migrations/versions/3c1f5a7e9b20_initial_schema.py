"""initial_schema

Create the schema owned by the invitation engine:
- Invitations (all domains, one live invitation per scope and email)
- Notifications (per-recipient inbox)
- Questions and answers (verification question bank)
- User answers (submitted questionnaires)
- Memberships (accepted project, team and connection invitations)

Users, subjects and platform settings belong to the account service and are
only read here.

Revision ID: 3c1f5a7e9b20
Revises:
Create Date: 2026-10-19 10:12:41.204518

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f5a7e9b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # INVITATIONS table
    # ========================================================================
    op.create_table(
        "invitations",
        _id(),
        sa.Column("domain", sa.String(32), nullable=False),
        # Subject for subject domains, inviter for connections
        sa.Column("scope_id", sa.UUID(), nullable=False),
        sa.Column("subject_id", sa.UUID(), nullable=True),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("verifier_id", sa.UUID(), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("last_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("designation", sa.String(255), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("status", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["invited_by"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["verifier_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_invitations_email_domain", "invitations", ["email", "domain"]
    )
    op.create_index("idx_invitations_scope", "invitations", ["domain", "scope_id"])
    op.create_index(
        "idx_invitations_unique_active",
        "invitations",
        ["domain", "scope_id", "email"],
        unique=True,
        postgresql_where=sa.text("is_deleted = false"),
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("notification_type", sa.String(32), nullable=False),
        sa.Column("type_id", sa.UUID(), nullable=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_viewed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("status", sa.Boolean(), nullable=False, server_default="true"),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_user_created",
        "notifications",
        ["user_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # QUESTION BANK
    # ========================================================================
    op.create_table(
        "questions",
        _id(),
        sa.Column("domain", sa.String(32), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("field_name", sa.String(100), nullable=True),
        sa.Column("parent_question_id", sa.UUID(), nullable=True),
        sa.Column("weightage", sa.Float(), nullable=True),
        sa.Column("status", sa.Boolean(), nullable=False, server_default="true"),
        _created_at(),
        sa.ForeignKeyConstraint(
            ["parent_question_id"], ["questions.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_questions_domain", "questions", ["domain"])

    op.create_table(
        "answers",
        _id(),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("value", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False, server_default="true"),
        _created_at(),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "user_answers",
        _id(),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("verified_by", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("answer_id", sa.UUID(), nullable=False),
        sa.Column("domain", sa.String(32), nullable=False),
        sa.Column("verification_id", sa.UUID(), nullable=False),
        sa.Column("answer_type", sa.String(32), nullable=False),
        sa.Column("value", sa.Integer(), nullable=True),
        sa.Column("is_nps", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.ForeignKeyConstraint(["invited_by"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["verified_by"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"]),
        sa.ForeignKeyConstraint(["answer_id"], ["answers.id"]),
        sa.ForeignKeyConstraint(
            ["verification_id"], ["invitations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_user_answers_verification", "user_answers", ["verification_id"]
    )

    # ========================================================================
    # MEMBERSHIPS table
    # ========================================================================
    op.create_table(
        "memberships",
        _id(),
        sa.Column("domain", sa.String(32), nullable=False),
        # Project or team id, or the inviting user for connections
        sa.Column("subject_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("status", sa.Boolean(), nullable=False, server_default="true"),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "domain", "subject_id", "user_id", name="uq_memberships_member"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("memberships")
    op.drop_index("idx_user_answers_verification", table_name="user_answers")
    op.drop_table("user_answers")
    op.drop_table("answers")
    op.drop_index("idx_questions_domain", table_name="questions")
    op.drop_table("questions")
    op.drop_index("idx_notifications_user_created", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("idx_invitations_unique_active", table_name="invitations")
    op.drop_index("idx_invitations_scope", table_name="invitations")
    op.drop_index("idx_invitations_email_domain", table_name="invitations")
    op.drop_table("invitations")
