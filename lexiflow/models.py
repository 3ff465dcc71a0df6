"""Database models."""

from datetime import date, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiflow.database import Base


class User(Base):
    """A learner account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    base_language_code: Mapped[str] = mapped_column(String(8), nullable=False, default="en")
    target_language_code: Mapped[str | None] = mapped_column(String(8), nullable=True)
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    study_preferences: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    settings: Mapped["UserSettings | None"] = relationship(
        back_populates="user", cascade="all, delete-orphan", uselist=False, lazy="joined"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class UserSettings(Base):
    """Learning settings of one user. Missing row means all defaults."""

    __tablename__ = "user_settings"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    daily_goal: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    notifications_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    sound_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    auto_play_audio: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    dark_mode: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    session_duration: Mapped[int] = mapped_column(Integer, nullable=False, default=15)
    review_interval: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    difficulty_preference: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    learning_reminders: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    user: Mapped[User] = relationship(back_populates="settings")


class Word(Base):
    """Shared catalogue headword."""

    __tablename__ = "words"
    __table_args__ = (UniqueConstraint("text", "language_code", name="uq_word_text_language"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    text: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    language_code: Mapped[str] = mapped_column(String(8), index=True, nullable=False)
    phonetic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    frequency: Mapped[int | None] = mapped_column(Integer, nullable=True)
    etymology: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    details: Mapped[list["WordDetail"]] = relationship(
        back_populates="word", cascade="all, delete-orphan", order_by="WordDetail.id"
    )

    def __repr__(self) -> str:
        return f"<Word(id={self.id}, text='{self.text}', language='{self.language_code}')>"


class WordDetail(Base):
    """Part-of-speech specific sense of a word."""

    __tablename__ = "word_details"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    word_id: Mapped[int] = mapped_column(
        ForeignKey("words.id", ondelete="CASCADE"), index=True, nullable=False
    )
    part_of_speech: Mapped[str] = mapped_column(String(32), nullable=False, default="undefined")
    variant: Mapped[str | None] = mapped_column(String(255), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(16), nullable=True)
    phonetic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    forms: Mapped[str | None] = mapped_column(Text, nullable=True)
    frequency: Mapped[int | None] = mapped_column(Integer, nullable=True)
    source: Mapped[str] = mapped_column(String(32), nullable=False, default="user")

    word: Mapped[Word] = relationship(back_populates="details")
    definitions: Mapped[list["Definition"]] = relationship(
        back_populates="word_detail", cascade="all, delete-orphan", order_by="Definition.id"
    )


class Definition(Base):
    """A single meaning, optionally illustrated with an image and audio."""

    __tablename__ = "definitions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    word_detail_id: Mapped[int] = mapped_column(
        ForeignKey("word_details.id", ondelete="CASCADE"), index=True, nullable=False
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    language_code: Mapped[str] = mapped_column(String(8), nullable=False)
    source: Mapped[str] = mapped_column(String(32), nullable=False, default="user")
    translation: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    audio_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    usage_note: Mapped[str | None] = mapped_column(Text, nullable=True)
    examples: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    word_detail: Mapped[WordDetail] = relationship(back_populates="definitions")


class Category(Base):
    """Grouping for word lists."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class WordList(Base):
    """Official (ownerless) or community word list."""

    __tablename__ = "word_lists"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    base_language_code: Mapped[str] = mapped_column(String(8), nullable=False)
    target_language_code: Mapped[str] = mapped_column(String(8), index=True, nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), index=True, nullable=True
    )
    owner_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=True
    )
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    cover_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    difficulty_level: Mapped[str] = mapped_column(String(16), nullable=False, default="beginner")
    learned_word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    entries: Mapped[list["WordListDefinition"]] = relationship(
        cascade="all, delete-orphan", order_by="WordListDefinition.position"
    )


class WordListDefinition(Base):
    """Ordered membership of a definition in a word list."""

    __tablename__ = "word_list_definitions"

    word_list_id: Mapped[int] = mapped_column(
        ForeignKey("word_lists.id", ondelete="CASCADE"), primary_key=True
    )
    definition_id: Mapped[int] = mapped_column(
        ForeignKey("definitions.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class UserWord(Base):
    """A definition in a user's personal dictionary, with learning progress."""

    __tablename__ = "user_words"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    definition_id: Mapped[int] = mapped_column(
        ForeignKey("definitions.id", ondelete="CASCADE"), index=True, nullable=False
    )
    base_language_code: Mapped[str] = mapped_column(String(8), nullable=False)
    target_language_code: Mapped[str] = mapped_column(String(8), nullable=False)

    custom_definition: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_translation: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_phonetic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    custom_difficulty_level: Mapped[str | None] = mapped_column(String(16), nullable=True)
    is_modified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    learning_status: Mapped[str] = mapped_column(
        String(16), index=True, nullable=False, default="notStarted"
    )
    progress: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    amount_of_mistakes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    skip_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    mastery_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    last_reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    started_learning_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    learned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    next_review_due: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    srs_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    srs_interval: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_srs_success: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    next_srs_review: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), index=True)
    last_used_in_context: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    definition: Mapped[Definition] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<UserWord(id={self.id}, user_id={self.user_id}, definition_id={self.definition_id})>"


class UserList(Base):
    """A word list in a user's collection, inherited or custom."""

    __tablename__ = "user_lists"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    list_id: Mapped[int | None] = mapped_column(
        ForeignKey("word_lists.id", ondelete="SET NULL"), index=True, nullable=True
    )
    base_language_code: Mapped[str] = mapped_column(String(8), nullable=False)
    target_language_code: Mapped[str] = mapped_column(String(8), nullable=False)
    custom_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_cover_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    custom_difficulty: Mapped[str | None] = mapped_column(String(16), nullable=True)
    is_modified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    progress: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    entries: Mapped[list["UserListWord"]] = relationship(
        cascade="all, delete-orphan", order_by="UserListWord.position"
    )


class UserListWord(Base):
    """Ordered membership of a dictionary entry in a user list."""

    __tablename__ = "user_list_words"

    user_list_id: Mapped[int] = mapped_column(
        ForeignKey("user_lists.id", ondelete="CASCADE"), primary_key=True
    )
    user_word_id: Mapped[int] = mapped_column(
        ForeignKey("user_words.id", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class LearningSession(Base):
    """A bounded run of practice."""

    __tablename__ = "learning_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    user_list_id: Mapped[int | None] = mapped_column(
        ForeignKey("user_lists.id", ondelete="SET NULL"), nullable=True
    )
    list_id: Mapped[int | None] = mapped_column(
        ForeignKey("word_lists.id", ondelete="SET NULL"), nullable=True
    )
    session_type: Mapped[str] = mapped_column(String(16), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    target_words: Mapped[int] = mapped_column(Integer, nullable=False, default=20)
    words_studied: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    words_learned: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_answers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    incorrect_answers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    score: Mapped[float | None] = mapped_column(Float, nullable=True)
    completion_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    difficulty_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    paused_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    paused_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    items: Mapped[list["SessionItem"]] = relationship(
        back_populates="session", cascade="all, delete-orphan", order_by="SessionItem.id"
    )


class SessionItem(Base):
    """One answered exercise inside a session."""

    __tablename__ = "session_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    session_id: Mapped[int] = mapped_column(
        ForeignKey("learning_sessions.id", ondelete="CASCADE"), index=True, nullable=False
    )
    user_word_id: Mapped[int] = mapped_column(
        ForeignKey("user_words.id", ondelete="CASCADE"), index=True, nullable=False
    )
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    response_time: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    attempts_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    exercise_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    accuracy: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    session: Mapped[LearningSession] = relationship(back_populates="items")


class LearningMistake(Base):
    """A wrong answer kept for error analytics."""

    __tablename__ = "learning_mistakes"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    user_word_id: Mapped[int] = mapped_column(
        ForeignKey("user_words.id", ondelete="CASCADE"), index=True, nullable=False
    )
    definition_id: Mapped[int] = mapped_column(
        ForeignKey("definitions.id", ondelete="CASCADE"), nullable=False
    )
    mistake_type: Mapped[str] = mapped_column(String(32), nullable=False)
    incorrect_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    context: Mapped[dict[str, object]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class DailyProgress(Base):
    """Per-day study totals."""

    __tablename__ = "daily_progress"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_daily_progress_user_date"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    day: Mapped[date] = mapped_column("date", Date, nullable=False)
    minutes_studied: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    words_learned: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    words_reviewed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sessions_completed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
