"""
LearningSession aggregate root.
"""

from dataclasses import dataclass, field
from datetime import datetime

from lexiflow.domain.common.aggregate_root import AggregateRoot
from lexiflow.domain.common.domain_event import DomainEvent
from lexiflow.domain.common.entity import Entity
from lexiflow.domain.common.exceptions import DomainError, ValidationError
from lexiflow.domain.common.value_objects.ids import (
    LearningSessionId,
    SessionItemId,
    UserId,
    UserListId,
    UserWordId,
    WordListId,
)
from lexiflow.domain.practice.exceptions import (
    SessionAlreadyEndedError,
    SessionNotPausedError,
    SessionPausedError,
)
from lexiflow.domain.practice.value_objects import ExerciseType, SessionType
from lexiflow.utils import round_half_up

DEFAULT_TARGET_WORDS = 20


@dataclass(frozen=True)
class SessionCompleted(DomainEvent):
    session_id: LearningSessionId | None = None
    user_id: UserId | None = None
    score: float = 0.0


@dataclass
class SessionItem(Entity[SessionItemId]):
    """One answered exercise inside a session."""

    id: SessionItemId
    user_word_id: UserWordId
    is_correct: bool
    response_time: int
    attempts_count: int = 1
    exercise_type: ExerciseType | None = None
    accuracy: float | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.response_time < 0:
            raise ValidationError(
                "Response time cannot be negative", field="response_time", value=self.response_time
            )
        if self.attempts_count < 1:
            raise ValidationError(
                "Attempts count must be at least 1",
                field="attempts_count",
                value=self.attempts_count,
            )


@dataclass
class LearningSession(AggregateRoot[LearningSessionId]):
    """
    A bounded run of practice.

    Business Rules:
    - End time cannot precede start time
    - Only active sessions (no end time) accept new items
    - Counters mirror the recorded items: correct + incorrect == items
    - Duration is stored in whole seconds and excludes time spent paused
    - A paused session accepts no items until it is resumed
    """

    id: LearningSessionId
    user_id: UserId
    session_type: SessionType
    start_time: datetime
    end_time: datetime | None = None
    duration: int | None = None
    user_list_id: UserListId | None = None
    list_id: WordListId | None = None
    target_words: int = DEFAULT_TARGET_WORDS
    words_studied: int = 0
    words_learned: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    score: float | None = None
    completion_percentage: float = 0.0
    difficulty_score: float | None = None
    paused_at: datetime | None = None
    paused_seconds: int = 0
    items: list[SessionItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.end_time is not None and self.end_time < self.start_time:
            raise DomainError("End time must be after start time")
        if self.target_words < 1:
            raise ValidationError(
                "Target words must be at least 1", field="target_words", value=self.target_words
            )

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    @property
    def total_answers(self) -> int:
        return self.correct_answers + self.incorrect_answers

    @property
    def current_accuracy(self) -> float:
        if self.total_answers == 0:
            return 0.0
        return self.correct_answers / self.total_answers * 100

    @property
    def is_paused(self) -> bool:
        return self.paused_at is not None

    def _ensure_active(self) -> None:
        if not self.is_active:
            raise SessionAlreadyEndedError(self.id.value)

    def _ensure_running(self) -> None:
        self._ensure_active()
        if self.is_paused:
            raise SessionPausedError(self.id.value)

    def _close_pause(self, now: datetime) -> None:
        if self.paused_at is not None:
            self.paused_seconds += max(0, round_half_up((now - self.paused_at).total_seconds()))
            self.paused_at = None

    def pause(self, now: datetime) -> None:
        """
        Stop the clock until ``resume``.

        Raises:
            SessionAlreadyEndedError: If the session has ended
            SessionPausedError: If the session is already paused
        """
        self._ensure_running()
        self.paused_at = now

    def resume(self, now: datetime) -> None:
        """
        Raises:
            SessionAlreadyEndedError: If the session has ended
            SessionNotPausedError: If the session is not paused
        """
        self._ensure_active()
        if not self.is_paused:
            raise SessionNotPausedError(self.id.value)
        self._close_pause(now)

    def record_item(
        self,
        user_word_id: UserWordId,
        is_correct: bool,
        response_time: int,
        attempts_count: int = 1,
        exercise_type: ExerciseType | None = None,
        accuracy: float | None = None,
        now: datetime | None = None,
    ) -> SessionItem:
        """
        Record one answered exercise and update the live counters.

        Raises:
            SessionAlreadyEndedError: If the session has ended
            SessionPausedError: If the session is paused
        """
        self._ensure_running()
        item = SessionItem(
            id=SessionItemId.generate(),
            user_word_id=user_word_id,
            is_correct=is_correct,
            response_time=response_time,
            attempts_count=attempts_count,
            exercise_type=exercise_type,
            accuracy=accuracy,
            created_at=now,
        )
        self.items.append(item)
        self.words_studied += 1
        if is_correct:
            self.correct_answers += 1
        else:
            self.incorrect_answers += 1
        self.completion_percentage = min(self.words_studied / self.target_words * 100, 100.0)
        return item

    def record_word_learned(self) -> None:
        self.words_learned += 1

    def update(
        self,
        end_time: datetime | None = None,
        duration: int | None = None,
        score: float | None = None,
        completion_percentage: float | None = None,
    ) -> None:
        """
        Update session fields. An end time without a duration derives the
        duration from the start time, minus the time spent paused.
        """
        if end_time is not None:
            if end_time < self.start_time:
                raise DomainError("End time must be after start time")
            self._close_pause(end_time)
            self.end_time = end_time
            if duration is None:
                elapsed = round_half_up((end_time - self.start_time).total_seconds())
                duration = max(0, elapsed - self.paused_seconds)
        if duration is not None:
            if duration < 0:
                raise ValidationError("Duration cannot be negative", field="duration")
            self.duration = duration
        if score is not None:
            self.score = score
        if completion_percentage is not None:
            if not 0 <= completion_percentage <= 100:
                raise ValidationError(
                    "Completion percentage must be between 0 and 100",
                    field="completion_percentage",
                    value=completion_percentage,
                )
            self.completion_percentage = completion_percentage

    def complete(self, score: float, difficulty_score: float, now: datetime) -> None:
        """
        Raises:
            SessionAlreadyEndedError: If the session has ended
        """
        self._ensure_active()
        self.update(end_time=now, score=score, completion_percentage=100.0)
        self.difficulty_score = difficulty_score
        self._record_event(SessionCompleted(session_id=self.id, user_id=self.user_id, score=score))

    def cancel(self, now: datetime) -> None:
        """End the session without scoring it."""
        self._ensure_active()
        self.update(end_time=now)

    @classmethod
    def start(
        cls,
        user_id: UserId,
        session_type: SessionType,
        now: datetime,
        user_list_id: UserListId | None = None,
        list_id: WordListId | None = None,
        target_words: int = DEFAULT_TARGET_WORDS,
    ) -> "LearningSession":
        """Start a new session (ID will be 0 until persisted)."""
        return cls(
            id=LearningSessionId.generate(),
            user_id=user_id,
            session_type=session_type,
            start_time=now,
            user_list_id=user_list_id,
            list_id=list_id,
            target_words=target_words,
        )
