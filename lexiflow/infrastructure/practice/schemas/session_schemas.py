"""Pydantic schemas for practice sessions and answers."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lexiflow.application.practice.dtos import (
    AttemptResult,
    DailyProgressSummary,
    SessionStart,
    SessionStats,
    SessionSummary,
)
from lexiflow.domain.practice.entities.daily_progress import DailyProgress
from lexiflow.domain.practice.entities.learning_session import LearningSession, SessionItem
from lexiflow.domain.practice.value_objects import (
    DifficultyAdjustment,
    ExerciseType,
    MistakeType,
    PerformanceRating,
    SessionType,
)
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.infrastructure.practice.schemas.exercise_schemas import PlannedExerciseResponse
from lexiflow.infrastructure.vocabulary.schemas import UserWordResponse


class SessionStartRequest(BaseModel):
    """
    Schema for starting a practice session.

    The words come from one of your lists, one of the catalogue lists, or,
    when neither is given, your whole dictionary.
    """

    session_type: SessionType = SessionType.PRACTICE
    user_list_id: int | None = None
    list_id: int | None = None
    word_count: int | None = Field(None, ge=1, description="Defaults to DEFAULT_SESSION_WORDS")
    difficulty: int | None = Field(None, ge=1, le=3)
    enabled_exercises: list[ExerciseType] | None = None
    skip_remember_translation: bool = False

    @model_validator(mode="after")
    def validate_source(self) -> "SessionStartRequest":
        if self.user_list_id is not None and self.list_id is not None:
            raise ValueError("Provide either user_list_id or list_id, not both")
        return self


class SessionUpdateRequest(BaseModel):
    end_time: datetime | None = None
    duration: int | None = Field(None, ge=0, description="Seconds")
    score: float | None = Field(None, ge=0, le=100)
    completion_percentage: float | None = Field(None, ge=0, le=100)


class SessionItemResponse(BaseModel):
    id: int
    user_word_id: int
    is_correct: bool
    response_time: int
    attempts_count: int
    exercise_type: ExerciseType | None = None
    accuracy: float | None = None
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, item: SessionItem) -> "SessionItemResponse":
        return cls(
            id=item.id.value,
            user_word_id=item.user_word_id.value,
            is_correct=item.is_correct,
            response_time=item.response_time,
            attempts_count=item.attempts_count,
            exercise_type=item.exercise_type,
            accuracy=item.accuracy,
            created_at=item.created_at,
        )


class SessionResponse(BaseModel):
    """Schema for a practice session."""

    id: int
    session_type: SessionType
    start_time: datetime
    end_time: datetime | None = None
    duration: int | None = Field(None, description="Seconds")
    user_list_id: int | None = None
    list_id: int | None = None
    target_words: int
    words_studied: int
    words_learned: int
    correct_answers: int
    incorrect_answers: int
    score: float | None = None
    completion_percentage: float
    difficulty_score: float | None = None
    is_active: bool
    is_paused: bool = False
    paused_seconds: int = Field(0, description="Seconds spent paused so far")
    items: list[SessionItemResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(
        cls, session: LearningSession, include_items: bool = True
    ) -> "SessionResponse":
        return cls(
            id=session.id.value,
            session_type=session.session_type,
            start_time=session.start_time,
            end_time=session.end_time,
            duration=session.duration,
            user_list_id=session.user_list_id.value if session.user_list_id else None,
            list_id=session.list_id.value if session.list_id else None,
            target_words=session.target_words,
            words_studied=session.words_studied,
            words_learned=session.words_learned,
            correct_answers=session.correct_answers,
            incorrect_answers=session.incorrect_answers,
            score=session.score,
            completion_percentage=session.completion_percentage,
            difficulty_score=session.difficulty_score,
            is_active=session.is_active,
            is_paused=session.is_paused,
            paused_seconds=session.paused_seconds,
            items=[SessionItemResponse.from_domain(item) for item in session.items]
            if include_items
            else [],
        )


class SessionStartResponse(BaseModel):
    session: SessionResponse
    exercises: list[PlannedExerciseResponse]
    overdue_count: int = 0
    due_count: int = 0
    new_count: int = 0
    hard_count: int = 0
    medium_count: int = 0
    easy_count: int = 0

    @classmethod
    def from_start(cls, start: SessionStart) -> "SessionStartResponse":
        return cls(
            session=SessionResponse.from_domain(start.session),
            exercises=[PlannedExerciseResponse.from_planned(p) for p in start.exercises],
            overdue_count=start.overdue_count,
            due_count=start.due_count,
            new_count=start.new_count,
            hard_count=start.hard_count,
            medium_count=start.medium_count,
            easy_count=start.easy_count,
        )


class WordResultResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_word_id: int
    word: str
    attempts: int
    correct: int
    accuracy: int
    average_response_time: float
    mastery_score: float
    learning_status: str
    next_review_due: datetime | None = None


class SessionSummaryResponse(BaseModel):
    """Schema for the result of completing a session."""

    session: SessionResponse
    total_words: int
    correct_answers: int
    incorrect_answers: int
    accuracy: int
    average_response_time: float = Field(..., description="Milliseconds")
    difficulty_score: float
    performance_rating: PerformanceRating
    difficulty_adjustment: DifficultyAdjustment
    word_results: list[WordResultResponse]

    @classmethod
    def from_summary(cls, summary: SessionSummary) -> "SessionSummaryResponse":
        return cls(
            session=SessionResponse.from_domain(summary.session),
            total_words=summary.total_words,
            correct_answers=summary.correct_answers,
            incorrect_answers=summary.incorrect_answers,
            accuracy=summary.accuracy,
            average_response_time=summary.average_response_time,
            difficulty_score=summary.difficulty_score,
            performance_rating=summary.performance_rating,
            difficulty_adjustment=summary.difficulty_adjustment,
            word_results=[WordResultResponse.model_validate(r) for r in summary.word_results],
        )


class SessionStatsResponse(BaseModel):
    total_sessions: int
    completed_sessions: int
    total_words_studied: int
    total_words_learned: int
    total_correct: int
    total_incorrect: int
    average_score: float
    total_duration: int = Field(..., description="Seconds")
    streak_days: int
    last_session_date: datetime | None = None
    recent_sessions: list[SessionResponse]

    @classmethod
    def from_stats(cls, stats: SessionStats) -> "SessionStatsResponse":
        return cls(
            total_sessions=stats.total_sessions,
            completed_sessions=stats.completed_sessions,
            total_words_studied=stats.total_words_studied,
            total_words_learned=stats.total_words_learned,
            total_correct=stats.total_correct,
            total_incorrect=stats.total_incorrect,
            average_score=stats.average_score,
            total_duration=stats.total_duration,
            streak_days=stats.streak_days,
            last_session_date=stats.last_session_date,
            recent_sessions=[
                SessionResponse.from_domain(s, include_items=False) for s in stats.recent_sessions
            ],
        )


class DailyProgressResponse(BaseModel):
    date: date
    minutes_studied: int
    words_learned: int
    words_reviewed: int
    sessions_completed: int

    @classmethod
    def from_domain(cls, progress: DailyProgress) -> "DailyProgressResponse":
        return cls(
            date=progress.date,
            minutes_studied=progress.minutes_studied,
            words_learned=progress.words_learned,
            words_reviewed=progress.words_reviewed,
            sessions_completed=progress.sessions_completed,
        )


class DailyProgressSummaryResponse(BaseModel):
    start_date: date
    end_date: date
    days: list[DailyProgressResponse]
    total_minutes: int
    total_words_learned: int
    total_sessions: int

    @classmethod
    def from_summary(cls, summary: DailyProgressSummary) -> "DailyProgressSummaryResponse":
        return cls(
            start_date=summary.start_date,
            end_date=summary.end_date,
            days=[DailyProgressResponse.from_domain(day) for day in summary.days],
            total_minutes=summary.total_minutes,
            total_words_learned=summary.total_words_learned,
            total_sessions=summary.total_sessions,
        )


class AttemptRequest(BaseModel):
    """
    Schema for answering one exercise.

    Which answer field is required depends on the exercise: ``remembered``
    for remember-translation, ``selected_index`` with the shown ``options``
    for choose-right-word, and ``user_input`` for the writing exercises.
    """

    user_word_id: int
    exercise_type: ExerciseType
    response_time: int = Field(..., ge=0, description="Milliseconds")
    attempts_count: int = Field(1, ge=1)
    user_input: str | None = None
    selected_index: int | None = Field(None, ge=0)
    options: list[str] | None = None
    remembered: bool | None = None
    enabled_exercises: list[ExerciseType] | None = None
    skip_remember_translation: bool = False


class CharacterDifferenceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    position: int
    expected: str
    actual: str


class AnswerCheckResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_correct: bool
    accuracy: int
    partial_credit: bool
    feedback: str | None = None
    differences: list[CharacterDifferenceResponse]


class ProgressionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    previous_level: int
    new_level: int
    learning_status: LearningStatus
    mastery_score: int
    attempts: int
    successes: int
    next_exercise: ExerciseType
    level_changed: bool


class SrsIntervalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hours: int
    next_review: datetime


class MistakeResponse(BaseModel):
    id: int
    mistake_type: MistakeType
    incorrect_value: str | None = None


class AttemptResponse(BaseModel):
    """Schema for the outcome of one answered exercise."""

    check: AnswerCheckResponse
    item: SessionItemResponse
    user_word: UserWordResponse
    progression: ProgressionResponse
    interval: SrsIntervalResponse
    points: int
    response_time_bonus: int
    word_learned: bool
    mistake: MistakeResponse | None = None
    next_exercise: PlannedExerciseResponse | None = None

    @classmethod
    def from_result(cls, result: AttemptResult) -> "AttemptResponse":
        mistake = None
        if result.mistake is not None:
            mistake = MistakeResponse(
                id=result.mistake.id.value,
                mistake_type=result.mistake.mistake_type,
                incorrect_value=result.mistake.incorrect_value,
            )
        return cls(
            check=AnswerCheckResponse.model_validate(result.check),
            item=SessionItemResponse.from_domain(result.item),
            user_word=UserWordResponse.from_domain(result.user_word),
            progression=ProgressionResponse.model_validate(result.outcome),
            interval=SrsIntervalResponse.model_validate(result.interval),
            points=result.points,
            response_time_bonus=result.response_time_bonus,
            word_learned=result.word_learned,
            mistake=mistake,
            next_exercise=PlannedExerciseResponse.from_planned(result.next_exercise)
            if result.next_exercise
            else None,
        )
