"""Add learner profile columns, user_settings table and session pause tracking.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Add profile columns to users, create user_settings and pause columns on sessions."""
    op.add_column("users", sa.Column("target_language_code", sa.String(8), nullable=True))
    op.add_column("users", sa.Column("study_preferences", sa.JSON(), nullable=True))
    op.add_column("users", sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True))

    op.create_table(
        "user_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("daily_goal", sa.Integer(), nullable=False, server_default="5"),
        sa.Column(
            "notifications_enabled", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column("sound_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("auto_play_audio", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("dark_mode", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("session_duration", sa.Integer(), nullable=False, server_default="15"),
        sa.Column("review_interval", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("difficulty_preference", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("learning_reminders", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(op.f("ix_user_settings_id"), "user_settings", ["id"], unique=False)

    op.add_column(
        "learning_sessions",
        sa.Column("paused_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.add_column(
        "learning_sessions",
        sa.Column("paused_seconds", sa.Integer(), nullable=False, server_default="0"),
    )


def downgrade() -> None:
    """Remove pause tracking, user_settings and the profile columns."""
    op.drop_column("learning_sessions", "paused_seconds")
    op.drop_column("learning_sessions", "paused_at")

    op.drop_index(op.f("ix_user_settings_id"), table_name="user_settings")
    op.drop_table("user_settings")

    op.drop_column("users", "deleted_at")
    op.drop_column("users", "study_preferences")
    op.drop_column("users", "target_language_code")
