"""Result and filter types for practice use cases."""

from dataclasses import dataclass, field
from datetime import date, datetime

from lexiflow.domain.practice.entities.daily_progress import DailyProgress
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.entities.learning_session import LearningSession, SessionItem
from lexiflow.domain.practice.services.answer_validator import AnswerCheck
from lexiflow.domain.practice.services.exercise_generator import Exercise
from lexiflow.domain.practice.services.progression_service import (
    ExerciseSelection,
    ProgressionOutcome,
    SrsInterval,
)
from lexiflow.domain.practice.value_objects import (
    DifficultyAdjustment,
    PerformanceRating,
    SessionType,
)
from lexiflow.domain.vocabulary.entities.user_word import UserWord


@dataclass(frozen=True)
class SessionHistoryFilters:
    session_type: SessionType | None = None
    user_list_id: int | None = None
    list_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass
class PlannedExercise:
    """A word picked for a session together with how it will be practiced."""

    user_word: UserWord
    selection: ExerciseSelection
    exercise: Exercise


@dataclass
class SessionStart:
    session: LearningSession
    exercises: list[PlannedExercise]
    overdue_count: int = 0
    due_count: int = 0
    new_count: int = 0
    hard_count: int = 0
    medium_count: int = 0
    easy_count: int = 0


@dataclass
class AttemptResult:
    """Everything that changed after one answered exercise."""

    check: AnswerCheck
    item: SessionItem
    user_word: UserWord
    outcome: ProgressionOutcome
    interval: SrsInterval
    points: int
    response_time_bonus: int
    word_learned: bool
    mistake: LearningMistake | None = None
    next_exercise: PlannedExercise | None = None


@dataclass
class WordResult:
    user_word_id: int
    word: str
    attempts: int
    correct: int
    accuracy: int
    average_response_time: float
    mastery_score: float
    learning_status: str
    next_review_due: datetime | None = None


@dataclass
class SessionSummary:
    session: LearningSession
    total_words: int
    correct_answers: int
    incorrect_answers: int
    accuracy: int
    average_response_time: float
    difficulty_score: float
    performance_rating: PerformanceRating
    difficulty_adjustment: DifficultyAdjustment
    word_results: list[WordResult] = field(default_factory=list)


@dataclass
class SessionStats:
    total_sessions: int
    completed_sessions: int
    total_words_studied: int
    total_words_learned: int
    total_correct: int
    total_incorrect: int
    average_score: float
    total_duration: int
    streak_days: int
    last_session_date: datetime | None
    recent_sessions: list[LearningSession] = field(default_factory=list)


@dataclass
class DailyProgressSummary:
    days: list[DailyProgress]
    start_date: date
    end_date: date

    @property
    def total_minutes(self) -> int:
        return sum(day.minutes_studied for day in self.days)

    @property
    def total_words_learned(self) -> int:
        return sum(day.words_learned for day in self.days)

    @property
    def total_sessions(self) -> int:
        return sum(day.sessions_completed for day in self.days)
