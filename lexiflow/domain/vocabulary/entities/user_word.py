"""
UserWord aggregate root: one definition in a user's personal dictionary.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from lexiflow.domain.common.aggregate_root import AggregateRoot
from lexiflow.domain.common.domain_event import DomainEvent
from lexiflow.domain.common.exceptions import DomainError, ValidationError
from lexiflow.domain.common.value_objects.ids import DefinitionId, UserId, UserWordId
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.domain.vocabulary.value_objects import LearningStatus, WordContent
from lexiflow.utils import round_half_up

MAX_SRS_LEVEL = 5


@dataclass(frozen=True)
class WordLearned(DomainEvent):
    user_word_id: UserWordId | None = None
    user_id: UserId | None = None


@dataclass
class UserWord(AggregateRoot[UserWordId]):
    """
    A user's dictionary entry and everything known about how well they know it.

    Business Rules:
    - One active entry per (user, definition); enforced by the repository
    - Counters never go negative; srs_level stays within 0..MAX_SRS_LEVEL
    - mastery_score and progress stay within 0..100
    - learned_at is set the first time the entry reaches ``learned``
    - Customizing any text field marks the entry as modified
    """

    # Identity
    id: UserWordId
    user_id: UserId
    definition_id: DefinitionId
    base_language_code: LanguageCode
    target_language_code: LanguageCode

    # Customizations
    custom_definition: str | None = None
    custom_translation: str | None = None
    custom_phonetic: str | None = None
    custom_notes: str | None = None
    custom_tags: list[str] = field(default_factory=list)
    custom_difficulty_level: DifficultyLevel | None = None
    is_modified: bool = False
    is_favorite: bool = False

    # Learning progress
    learning_status: LearningStatus = LearningStatus.NOT_STARTED
    progress: float = 0.0
    review_count: int = 0
    amount_of_mistakes: int = 0
    correct_streak: int = 0
    skip_count: int = 0
    mastery_score: float = 0.0
    last_reviewed_at: datetime | None = None
    started_learning_at: datetime | None = None
    learned_at: datetime | None = None
    next_review_due: datetime | None = None

    # Spaced repetition
    srs_level: int = 0
    srs_interval: int = 0
    last_srs_success: bool | None = None
    next_srs_review: datetime | None = None
    last_used_in_context: datetime | None = None
    usage_count: int = 0

    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    content: WordContent | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.srs_level <= MAX_SRS_LEVEL:
            raise ValidationError(
                f"SRS level must be between 0 and {MAX_SRS_LEVEL}",
                field="srs_level",
                value=self.srs_level,
            )
        if not 0 <= self.mastery_score <= 100:
            raise ValidationError(
                "Mastery score must be between 0 and 100",
                field="mastery_score",
                value=self.mastery_score,
            )

    # Derived values

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def correct_answers(self) -> int:
        """Estimated count of correct answers, derived from mastery and reviews."""
        return round_half_up(self.review_count * self.mastery_score / 100)

    @property
    def word_text(self) -> str:
        return self.content.word_text if self.content else ""

    @property
    def definition_text(self) -> str:
        if self.custom_definition:
            return self.custom_definition
        return self.content.definition_text if self.content else ""

    @property
    def translation(self) -> str | None:
        if self.custom_translation:
            return self.custom_translation
        return self.content.translation if self.content else None

    @property
    def phonetic(self) -> str | None:
        if self.custom_phonetic:
            return self.custom_phonetic
        return self.content.phonetic if self.content else None

    def is_due(self, now: datetime) -> bool:
        return self.next_srs_review is None or self.next_srs_review <= now

    def needs_review(self, now: datetime) -> bool:
        return self.learning_status == LearningStatus.NEEDS_REVIEW or (
            self.next_review_due is not None and self.next_review_due <= now
        )

    # Customization

    def customize(
        self,
        custom_definition: str | None = None,
        custom_translation: str | None = None,
        custom_phonetic: str | None = None,
        custom_notes: str | None = None,
        custom_tags: list[str] | None = None,
        custom_difficulty_level: DifficultyLevel | None = None,
    ) -> None:
        changed = False
        if custom_definition is not None:
            self.custom_definition = custom_definition.strip() or None
            changed = True
        if custom_translation is not None:
            self.custom_translation = custom_translation.strip() or None
            changed = True
        if custom_phonetic is not None:
            self.custom_phonetic = custom_phonetic.strip() or None
            changed = True
        if custom_notes is not None:
            self.custom_notes = custom_notes.strip() or None
            changed = True
        if custom_tags is not None:
            self.custom_tags = sorted({tag.strip().lower() for tag in custom_tags if tag.strip()})
            changed = True
        if custom_difficulty_level is not None:
            self.custom_difficulty_level = custom_difficulty_level
            changed = True
        if changed:
            self.is_modified = True

    def toggle_favorite(self) -> bool:
        self.is_favorite = not self.is_favorite
        return self.is_favorite

    def soft_delete(self, now: datetime | None = None) -> None:
        if self.is_deleted:
            raise DomainError("Dictionary entry is already deleted")
        self.deleted_at = now or datetime.now(UTC)

    def restore(self) -> None:
        if not self.is_deleted:
            raise DomainError("Dictionary entry is not deleted")
        self.deleted_at = None

    # Learning

    def record_skip(self, now: datetime) -> None:
        self.skip_count += 1
        self.last_reviewed_at = now

    def record_review(self, is_correct: bool, now: datetime) -> None:
        """Update review counters after one answered exercise."""
        if self.started_learning_at is None:
            self.started_learning_at = now
        self.review_count += 1
        if is_correct:
            self.correct_streak += 1
        else:
            self.correct_streak = 0
            self.amount_of_mistakes += 1
        self.last_reviewed_at = now
        self.last_used_in_context = now
        self.usage_count += 1
        self.last_srs_success = is_correct

    def apply_progression(
        self,
        srs_level: int,
        learning_status: LearningStatus,
        mastery_score: float,
        now: datetime,
    ) -> None:
        """Store the outcome of the progression rules."""
        if not 0 <= srs_level <= MAX_SRS_LEVEL:
            raise ValidationError(
                f"SRS level must be between 0 and {MAX_SRS_LEVEL}",
                field="srs_level",
                value=srs_level,
            )
        self.srs_level = srs_level
        self.mastery_score = max(0.0, min(float(mastery_score), 100.0))
        self.progress = min(self.mastery_score, 100.0)
        self.learning_status = learning_status
        if learning_status == LearningStatus.LEARNED and self.learned_at is None:
            self.learned_at = now
            self._record_event(WordLearned(user_word_id=self.id, user_id=self.user_id))

    def set_learning_status(
        self,
        learning_status: LearningStatus,
        now: datetime,
        progress: float | None = None,
        mastery_score: float | None = None,
        next_review_due: datetime | None = None,
    ) -> None:
        """
        Set the learning status by hand, counting it as a review.

        Raises:
            ValidationError: If progress or mastery_score is outside 0..100
        """
        for name, value in (("progress", progress), ("mastery_score", mastery_score)):
            if value is not None and not 0 <= value <= 100:
                raise ValidationError(
                    f"{name.replace('_', ' ').capitalize()} must be between 0 and 100",
                    field=name,
                    value=value,
                )
        self.learning_status = learning_status
        self.last_reviewed_at = now
        self.review_count += 1
        if progress is not None:
            self.progress = float(progress)
        if mastery_score is not None:
            self.mastery_score = float(mastery_score)
        if next_review_due is not None:
            self.next_review_due = next_review_due
        if learning_status == LearningStatus.IN_PROGRESS and self.started_learning_at is None:
            self.started_learning_at = now
        if learning_status == LearningStatus.LEARNED and self.learned_at is None:
            self.learned_at = now
            self._record_event(WordLearned(user_word_id=self.id, user_id=self.user_id))

    def schedule_review(self, interval_hours: int, now: datetime) -> datetime:
        """Set the next SRS review ``interval_hours`` from now and return it."""
        if interval_hours < 1:
            raise ValidationError(
                "Review interval must be at least one hour",
                field="srs_interval",
                value=interval_hours,
            )
        self.srs_interval = interval_hours
        self.next_srs_review = now + timedelta(hours=interval_hours)
        return self.next_srs_review

    def plan_next_review(self, due: datetime) -> None:
        """Set the day-scale review reminder shown after a completed session."""
        self.next_review_due = due

    @classmethod
    def create(
        cls,
        user_id: UserId,
        definition_id: DefinitionId,
        base_language_code: LanguageCode,
        target_language_code: LanguageCode,
        content: WordContent | None = None,
    ) -> "UserWord":
        """Create a new dictionary entry (ID will be 0 until persisted)."""
        return cls(
            id=UserWordId.generate(),
            user_id=user_id,
            definition_id=definition_id,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            content=content,
        )
