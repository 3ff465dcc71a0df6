"""
Result types of the per-word analytics engine.

Percentages are 0..100, response times are milliseconds, durations are days
unless the field name says otherwise.
"""

from dataclasses import dataclass, field
from datetime import datetime

from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.value_objects import LearningStatus


@dataclass
class BasicMetrics:
    total_attempts: int
    correct_attempts: int
    accuracy: int
    average_response_time: float
    current_streak: int
    mastery_score: float
    skip_count: int
    mistake_count: int
    srs_level: int
    learning_status: LearningStatus
    # Status recomputed from the raw answer history
    history_status: LearningStatus


@dataclass
class PositionBreakdown:
    early: float = 0.0
    middle: float = 0.0
    late: float = 0.0


@dataclass
class SessionPerformance:
    fastest_response: float = 0.0
    slowest_response: float = 0.0
    average_response_time: float = 0.0
    median_response_time: float = 0.0
    response_time_variance: float = 0.0
    consistency_score: float = 0.0
    average_attempts: float = 0.0
    first_attempt_success_rate: float = 0.0
    multiple_attempt_success_rate: float = 0.0
    accuracy_by_hour: dict[int, float] = field(default_factory=dict)
    accuracy_by_position: PositionBreakdown = field(default_factory=PositionBreakdown)


@dataclass
class ProgressionMetrics:
    mastery_progression: list[int]
    mastery_velocity: float
    stability_index: float
    srs_interval_optimality: float
    srs_success_rate: float
    days_to_first_correct: float | None
    days_to_stabilization: float | None
    retention_strength: float
    context_variety: int
    days_since_last_review: float
    frequency_optimality: float


@dataclass
class MistakeRecurrence:
    mistake_type: str
    frequency: int
    last_occurrence: datetime


@dataclass
class ExerciseMistakes:
    count: int
    rate: float


@dataclass
class Misspelling:
    incorrect: str
    frequency: int


@dataclass
class ErrorAnalytics:
    total_mistakes: int = 0
    mistakes_by_exercise_type: dict[str, ExerciseMistakes] = field(default_factory=dict)
    mistakes_by_hour: dict[int, int] = field(default_factory=dict)
    mistakes_by_position: PositionBreakdown = field(default_factory=PositionBreakdown)
    recurrence: list[MistakeRecurrence] = field(default_factory=list)
    common_misspellings: list[Misspelling] = field(default_factory=list)
    recovery_time_after_mistake: float = 0.0
    self_corrected: int = 0
    skipped: int = 0
    mistake_reduction_rate: float = 0.0


@dataclass
class ComparativeMetrics:
    learning_efficiency: float
    predicted_days_to_mastery: int
    optimal_review_frequency_hours: int
    performance_percentile: float


@dataclass
class ModalityMetrics:
    image_recall: float
    audio_recall: float
    pronunciation_difficulty: float
    listening_comprehension: float
    preferred_modality: str
    effectiveness: dict[str, float]


@dataclass
class WeekdayPerformance:
    accuracy: float
    response_time: float


@dataclass
class ContextualMetrics:
    by_weekday: dict[str, WeekdayPerformance]
    best_hour: int
    best_hour_accuracy: float


@dataclass
class RetentionPoint:
    days: int
    probability: float


@dataclass
class MasteryTimeline:
    optimistic: int
    realistic: int
    conservative: int


@dataclass
class Predictions:
    forgetting_curve: list[RetentionPoint]
    next_optimal_review: datetime
    retention_risk: str
    mastery_timeline: MasteryTimeline
    plateau_risk: int
    breakthrough_recommendations: list[str]
    next_exercise_type: ExerciseType
    recommended_intensity: str


@dataclass
class Insight:
    kind: str
    title: str
    description: str
    confidence: int
    suggested_action: str | None = None

    @property
    def actionable(self) -> bool:
        return self.suggested_action is not None


@dataclass
class Recommendation:
    category: str
    priority: str
    recommendation: str
    expected_improvement: str
    effort: str


@dataclass
class Milestone:
    date: datetime
    event: str
    details: str
    performance: int


@dataclass
class TrendPoint:
    date: datetime
    accuracy: int
    response_time: int


@dataclass
class ForecastPoint:
    date: datetime
    predicted_performance: float


@dataclass
class PerformanceTimeline:
    milestones: list[Milestone]
    trend: list[TrendPoint]
    forecast: list[ForecastPoint]


@dataclass
class WordAnalytics:
    user_word_id: int
    word: str
    basic: BasicMetrics
    session_performance: SessionPerformance
    progression: ProgressionMetrics
    errors: ErrorAnalytics
    comparative: ComparativeMetrics
    modality: ModalityMetrics
    contextual: ContextualMetrics
    predictions: Predictions
    insights: list[Insight]
    recommendations: list[Recommendation]
    timeline: PerformanceTimeline
