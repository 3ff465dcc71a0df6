"""Initial schema: users, catalogue, personal dictionary and practice tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("base_language_code", sa.String(8), nullable=False, server_default="en"),
        sa.Column("hashed_password", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("text", sa.String(255), nullable=False),
        sa.Column("language_code", sa.String(8), nullable=False),
        sa.Column("phonetic", sa.String(255), nullable=True),
        sa.Column("frequency", sa.Integer(), nullable=True),
        sa.Column("etymology", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("text", "language_code", name="uq_word_text_language"),
    )
    op.create_index(op.f("ix_words_id"), "words", ["id"], unique=False)
    op.create_index(op.f("ix_words_text"), "words", ["text"], unique=False)
    op.create_index(op.f("ix_words_language_code"), "words", ["language_code"], unique=False)

    op.create_table(
        "word_details",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("word_id", sa.Integer(), nullable=False),
        sa.Column("part_of_speech", sa.String(32), nullable=False),
        sa.Column("variant", sa.String(255), nullable=True),
        sa.Column("gender", sa.String(16), nullable=True),
        sa.Column("phonetic", sa.String(255), nullable=True),
        sa.Column("forms", sa.Text(), nullable=True),
        sa.Column("frequency", sa.Integer(), nullable=True),
        sa.Column("source", sa.String(32), nullable=False),
        sa.ForeignKeyConstraint(["word_id"], ["words.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_word_details_id"), "word_details", ["id"], unique=False)
    op.create_index(op.f("ix_word_details_word_id"), "word_details", ["word_id"], unique=False)

    op.create_table(
        "definitions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("word_detail_id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("language_code", sa.String(8), nullable=False),
        sa.Column("source", sa.String(32), nullable=False),
        sa.Column("translation", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("audio_url", sa.String(1024), nullable=True),
        sa.Column("usage_note", sa.Text(), nullable=True),
        sa.Column("examples", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(["word_detail_id"], ["word_details.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_definitions_id"), "definitions", ["id"], unique=False)
    op.create_index(
        op.f("ix_definitions_word_detail_id"), "definitions", ["word_detail_id"], unique=False
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_categories_id"), "categories", ["id"], unique=False)

    op.create_table(
        "word_lists",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("base_language_code", sa.String(8), nullable=False),
        sa.Column("target_language_code", sa.String(8), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("owner_id", sa.Integer(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("cover_image_url", sa.String(1024), nullable=True),
        sa.Column("difficulty_level", sa.String(16), nullable=False),
        sa.Column("learned_word_count", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_word_lists_id"), "word_lists", ["id"], unique=False)
    op.create_index(
        op.f("ix_word_lists_target_language_code"),
        "word_lists",
        ["target_language_code"],
        unique=False,
    )
    op.create_index(op.f("ix_word_lists_category_id"), "word_lists", ["category_id"], unique=False)
    op.create_index(op.f("ix_word_lists_owner_id"), "word_lists", ["owner_id"], unique=False)

    op.create_table(
        "word_list_definitions",
        sa.Column("word_list_id", sa.Integer(), nullable=False),
        sa.Column("definition_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["word_list_id"], ["word_lists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["definition_id"], ["definitions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("word_list_id", "definition_id"),
    )

    op.create_table(
        "user_words",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("definition_id", sa.Integer(), nullable=False),
        sa.Column("base_language_code", sa.String(8), nullable=False),
        sa.Column("target_language_code", sa.String(8), nullable=False),
        sa.Column("custom_definition", sa.Text(), nullable=True),
        sa.Column("custom_translation", sa.Text(), nullable=True),
        sa.Column("custom_phonetic", sa.String(255), nullable=True),
        sa.Column("custom_notes", sa.Text(), nullable=True),
        sa.Column("custom_tags", sa.JSON(), nullable=False),
        sa.Column("custom_difficulty_level", sa.String(16), nullable=True),
        sa.Column("is_modified", sa.Boolean(), nullable=False),
        sa.Column("is_favorite", sa.Boolean(), nullable=False),
        sa.Column("learning_status", sa.String(16), nullable=False),
        sa.Column("progress", sa.Float(), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False),
        sa.Column("amount_of_mistakes", sa.Integer(), nullable=False),
        sa.Column("correct_streak", sa.Integer(), nullable=False),
        sa.Column("skip_count", sa.Integer(), nullable=False),
        sa.Column("mastery_score", sa.Float(), nullable=False),
        sa.Column("last_reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("started_learning_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("learned_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_review_due", sa.DateTime(timezone=True), nullable=True),
        sa.Column("srs_level", sa.Integer(), nullable=False),
        sa.Column("srs_interval", sa.Integer(), nullable=False),
        sa.Column("last_srs_success", sa.Boolean(), nullable=True),
        sa.Column("next_srs_review", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_used_in_context", sa.DateTime(timezone=True), nullable=True),
        sa.Column("usage_count", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["definition_id"], ["definitions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_words_id"), "user_words", ["id"], unique=False)
    op.create_index(op.f("ix_user_words_user_id"), "user_words", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_user_words_definition_id"), "user_words", ["definition_id"], unique=False
    )
    op.create_index(
        op.f("ix_user_words_learning_status"), "user_words", ["learning_status"], unique=False
    )
    op.create_index(
        op.f("ix_user_words_next_srs_review"), "user_words", ["next_srs_review"], unique=False
    )

    op.create_table(
        "user_lists",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("list_id", sa.Integer(), nullable=True),
        sa.Column("base_language_code", sa.String(8), nullable=False),
        sa.Column("target_language_code", sa.String(8), nullable=False),
        sa.Column("custom_name", sa.String(255), nullable=True),
        sa.Column("custom_description", sa.Text(), nullable=True),
        sa.Column("custom_cover_image_url", sa.String(1024), nullable=True),
        sa.Column("custom_difficulty", sa.String(16), nullable=True),
        sa.Column("is_modified", sa.Boolean(), nullable=False),
        sa.Column("progress", sa.Float(), nullable=False),
        *_timestamps(),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["list_id"], ["word_lists.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_lists_id"), "user_lists", ["id"], unique=False)
    op.create_index(op.f("ix_user_lists_user_id"), "user_lists", ["user_id"], unique=False)
    op.create_index(op.f("ix_user_lists_list_id"), "user_lists", ["list_id"], unique=False)

    op.create_table(
        "user_list_words",
        sa.Column("user_list_id", sa.Integer(), nullable=False),
        sa.Column("user_word_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_list_id"], ["user_lists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_word_id"], ["user_words.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_list_id", "user_word_id"),
    )

    op.create_table(
        "learning_sessions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("user_list_id", sa.Integer(), nullable=True),
        sa.Column("list_id", sa.Integer(), nullable=True),
        sa.Column("session_type", sa.String(16), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("target_words", sa.Integer(), nullable=False),
        sa.Column("words_studied", sa.Integer(), nullable=False),
        sa.Column("words_learned", sa.Integer(), nullable=False),
        sa.Column("correct_answers", sa.Integer(), nullable=False),
        sa.Column("incorrect_answers", sa.Integer(), nullable=False),
        sa.Column("score", sa.Float(), nullable=True),
        sa.Column("completion_percentage", sa.Float(), nullable=False),
        sa.Column("difficulty_score", sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_list_id"], ["user_lists.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["list_id"], ["word_lists.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_learning_sessions_id"), "learning_sessions", ["id"], unique=False)
    op.create_index(
        op.f("ix_learning_sessions_user_id"), "learning_sessions", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_learning_sessions_start_time"), "learning_sessions", ["start_time"], unique=False
    )

    op.create_table(
        "session_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("session_id", sa.Integer(), nullable=False),
        sa.Column("user_word_id", sa.Integer(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("response_time", sa.Integer(), nullable=False),
        sa.Column("attempts_count", sa.Integer(), nullable=False),
        sa.Column("exercise_type", sa.String(32), nullable=True),
        sa.Column("accuracy", sa.Float(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["session_id"], ["learning_sessions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_word_id"], ["user_words.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_session_items_id"), "session_items", ["id"], unique=False)
    op.create_index(
        op.f("ix_session_items_session_id"), "session_items", ["session_id"], unique=False
    )
    op.create_index(
        op.f("ix_session_items_user_word_id"), "session_items", ["user_word_id"], unique=False
    )

    op.create_table(
        "learning_mistakes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("user_word_id", sa.Integer(), nullable=False),
        sa.Column("definition_id", sa.Integer(), nullable=False),
        sa.Column("mistake_type", sa.String(32), nullable=False),
        sa.Column("incorrect_value", sa.Text(), nullable=True),
        sa.Column("context", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_word_id"], ["user_words.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["definition_id"], ["definitions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_learning_mistakes_id"), "learning_mistakes", ["id"], unique=False)
    op.create_index(
        op.f("ix_learning_mistakes_user_id"), "learning_mistakes", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_learning_mistakes_user_word_id"),
        "learning_mistakes",
        ["user_word_id"],
        unique=False,
    )

    op.create_table(
        "daily_progress",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("minutes_studied", sa.Integer(), nullable=False),
        sa.Column("words_learned", sa.Integer(), nullable=False),
        sa.Column("words_reviewed", sa.Integer(), nullable=False),
        sa.Column("sessions_completed", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "date", name="uq_daily_progress_user_date"),
    )
    op.create_index(op.f("ix_daily_progress_id"), "daily_progress", ["id"], unique=False)
    op.create_index(
        op.f("ix_daily_progress_user_id"), "daily_progress", ["user_id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables."""
    for table in (
        "daily_progress",
        "learning_mistakes",
        "session_items",
        "learning_sessions",
        "user_list_words",
        "user_lists",
        "user_words",
        "word_list_definitions",
        "word_lists",
        "categories",
        "definitions",
        "word_details",
        "words",
        "users",
    ):
        op.drop_table(table)
