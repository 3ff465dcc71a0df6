"""
Pydantic schemas for the per-word analytics report.

They mirror the analytics result dataclasses and are validated straight from
them with ``from_attributes``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lexiflow.domain.analytics.word_analytics import WordAnalytics
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.value_objects import LearningStatus


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class BasicMetricsSchema(_FromDomain):
    total_attempts: int
    correct_attempts: int
    accuracy: int = Field(..., description="Percentage of correct attempts")
    average_response_time: float = Field(..., description="Milliseconds")
    current_streak: int
    mastery_score: float
    skip_count: int
    mistake_count: int
    srs_level: int
    learning_status: LearningStatus
    history_status: LearningStatus


class PositionBreakdownSchema(_FromDomain):
    early: float
    middle: float
    late: float


class SessionPerformanceSchema(_FromDomain):
    fastest_response: float
    slowest_response: float
    average_response_time: float
    median_response_time: float
    response_time_variance: float
    consistency_score: float
    average_attempts: float
    first_attempt_success_rate: float
    multiple_attempt_success_rate: float
    accuracy_by_hour: dict[int, float]
    accuracy_by_position: PositionBreakdownSchema


class ProgressionMetricsSchema(_FromDomain):
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


class MistakeRecurrenceSchema(_FromDomain):
    mistake_type: str
    frequency: int
    last_occurrence: datetime


class ExerciseMistakesSchema(_FromDomain):
    count: int
    rate: float


class MisspellingSchema(_FromDomain):
    incorrect: str
    frequency: int


class ErrorAnalyticsSchema(_FromDomain):
    total_mistakes: int
    mistakes_by_exercise_type: dict[str, ExerciseMistakesSchema]
    mistakes_by_hour: dict[int, int]
    mistakes_by_position: PositionBreakdownSchema
    recurrence: list[MistakeRecurrenceSchema]
    common_misspellings: list[MisspellingSchema]
    recovery_time_after_mistake: float
    self_corrected: int
    skipped: int
    mistake_reduction_rate: float


class ComparativeMetricsSchema(_FromDomain):
    learning_efficiency: float
    predicted_days_to_mastery: int
    optimal_review_frequency_hours: int
    performance_percentile: float


class ModalityMetricsSchema(_FromDomain):
    image_recall: float
    audio_recall: float
    pronunciation_difficulty: float
    listening_comprehension: float
    preferred_modality: str
    effectiveness: dict[str, float]


class WeekdayPerformanceSchema(_FromDomain):
    accuracy: float
    response_time: float


class ContextualMetricsSchema(_FromDomain):
    by_weekday: dict[str, WeekdayPerformanceSchema]
    best_hour: int
    best_hour_accuracy: float


class RetentionPointSchema(_FromDomain):
    days: int
    probability: float


class MasteryTimelineSchema(_FromDomain):
    optimistic: int
    realistic: int
    conservative: int


class PredictionsSchema(_FromDomain):
    forgetting_curve: list[RetentionPointSchema]
    next_optimal_review: datetime
    retention_risk: str
    mastery_timeline: MasteryTimelineSchema
    plateau_risk: int
    breakthrough_recommendations: list[str]
    next_exercise_type: ExerciseType
    recommended_intensity: str


class InsightSchema(_FromDomain):
    kind: str
    title: str
    description: str
    confidence: int
    actionable: bool
    suggested_action: str | None = None


class RecommendationSchema(_FromDomain):
    category: str
    priority: str
    recommendation: str
    expected_improvement: str
    effort: str


class MilestoneSchema(_FromDomain):
    date: datetime
    event: str
    details: str
    performance: int


class TrendPointSchema(_FromDomain):
    date: datetime
    accuracy: int
    response_time: int


class ForecastPointSchema(_FromDomain):
    date: datetime
    predicted_performance: float


class PerformanceTimelineSchema(_FromDomain):
    milestones: list[MilestoneSchema]
    trend: list[TrendPointSchema]
    forecast: list[ForecastPointSchema]


class WordAnalyticsResponse(_FromDomain):
    """Full analytics report for one dictionary entry."""

    user_word_id: int
    word: str
    basic: BasicMetricsSchema
    session_performance: SessionPerformanceSchema
    progression: ProgressionMetricsSchema
    errors: ErrorAnalyticsSchema
    comparative: ComparativeMetricsSchema
    modality: ModalityMetricsSchema
    contextual: ContextualMetricsSchema
    predictions: PredictionsSchema
    insights: list[InsightSchema]
    recommendations: list[RecommendationSchema]
    timeline: PerformanceTimelineSchema

    @classmethod
    def from_domain(cls, analytics: WordAnalytics) -> "WordAnalyticsResponse":
        return cls.model_validate(analytics)
