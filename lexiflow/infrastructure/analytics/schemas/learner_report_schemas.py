"""
Pydantic schemas for the learner-level reports: statistics, learning
analytics, dictionary performance and words needing attention.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from lexiflow.domain.analytics.learner_reports import (
    AttentionItem,
    LearnerStatistics,
    LearningAnalytics,
    PerformanceMetrics,
    PerformanceTrend,
    ProficiencyLevel,
    UrgencyLevel,
)
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.practice.value_objects import MistakeType, SessionType
from lexiflow.domain.vocabulary.value_objects import LearningStatus


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Statistics


class LearningProgressSchema(_FromDomain):
    total_words: int
    words_learned: int
    words_in_progress: int
    words_needing_review: int
    difficult_words: int
    average_mastery_score: float
    current_streak: int = Field(..., description="Consecutive study days ending today")
    longest_streak: int
    progress_percentage: float


class SessionStatisticsSchema(_FromDomain):
    total_sessions: int
    total_study_minutes: int
    average_session_minutes: int
    total_words_studied: int
    average_accuracy: float
    best_score: float
    recent_sessions: int = Field(..., description="Sessions started in the last 7 days")
    last_session_at: datetime | None


class ProblemWordSchema(_FromDomain):
    user_word_id: int
    word_text: str
    mistake_count: int
    last_mistake_at: datetime | None
    mistake_types: list[MistakeType]


class MistakeSummarySchema(_FromDomain):
    total_mistakes: int
    most_common_type: MistakeType | None
    improvement_rate: float
    problem_words: list[ProblemWordSchema]


class GoalProgressSchema(_FromDomain):
    daily_goal: int
    words_today: int
    words_this_week: int
    words_this_month: int
    goal_achievement_rate: float


class LanguageProgressSchema(_FromDomain):
    base_language_code: LanguageCode
    target_language_code: LanguageCode | None
    proficiency_level: ProficiencyLevel
    estimated_vocabulary_size: int


class LearnerStatisticsResponse(_FromDomain):
    learning_progress: LearningProgressSchema
    sessions: SessionStatisticsSchema
    mistakes: MistakeSummarySchema
    goal_progress: GoalProgressSchema
    language_progress: LanguageProgressSchema

    @classmethod
    def from_domain(cls, report: LearnerStatistics) -> "LearnerStatisticsResponse":
        return cls.model_validate(report)


# Learning analytics


class DailyActivitySchema(_FromDomain):
    day: date
    words_studied: int
    accuracy: float


class MistakeTypeCountSchema(_FromDomain):
    mistake_type: MistakeType
    count: int
    percentage: float


class WeekdayActivitySchema(_FromDomain):
    day: str
    sessions: int
    average_minutes: float


class VocabularyGrowthPointSchema(_FromDomain):
    day: date
    total_words: int


class LearningPatternsSchema(_FromDomain):
    most_active_hour: int = Field(..., ge=0, le=23)
    average_session_minutes: float
    preferred_session_type: SessionType
    weekly_distribution: list[WeekdayActivitySchema]


class LearningAnalyticsResponse(_FromDomain):
    days: int
    daily_progress: list[DailyActivitySchema]
    mistakes_by_type: list[MistakeTypeCountSchema]
    patterns: LearningPatternsSchema
    vocabulary_growth: list[VocabularyGrowthPointSchema]

    @classmethod
    def from_domain(cls, analytics: LearningAnalytics) -> "LearningAnalyticsResponse":
        return cls.model_validate(analytics)


# Dictionary performance


class LearningEfficiencySchema(_FromDomain):
    average_days_to_master: float
    words_learned_this_week: int
    retention_rate: float
    learning_velocity: float = Field(..., description="Words learned per day, last 30 days")


class PracticePerformanceSchema(_FromDomain):
    total_sessions: int
    average_accuracy: float
    average_response_time: float
    fastest_response_time: int
    slowest_response_time: int
    consistency_score: float
    response_time_consistency: float
    trend: PerformanceTrend
    recent_sessions: int
    best_score: float
    average_session_minutes: float


class MistakeAnalysisSchema(_FromDomain):
    total_mistakes: int
    mistakes_per_study_day: float
    problem_words: list[ProblemWordSchema]
    by_type: list[MistakeTypeCountSchema]
    average_mistakes_per_word: float
    highest_mistake_word: ProblemWordSchema | None


class StudyHabitsSchema(_FromDomain):
    current_streak: int
    longest_streak: int
    average_session_minutes: float
    preferred_hour: int
    study_consistency: float
    weekly_pattern: list[WeekdayActivitySchema]


class VocabularyManagementSchema(_FromDomain):
    words_added_this_week: int
    words_added_this_month: int
    favorite_words: int
    modified_words: int
    words_with_notes: int


class SrsLevelShareSchema(_FromDomain):
    level: int
    count: int
    percentage: float


class ReviewSystemSchema(_FromDomain):
    words_needing_review: int
    overdue_srs_words: int
    average_srs_level: float
    srs_distribution: list[SrsLevelShareSchema]
    next_review_due: datetime | None


class StatusShareSchema(_FromDomain):
    learning_status: LearningStatus
    count: int
    percentage: float


class MasteryRangeShareSchema(_FromDomain):
    label: str
    count: int
    percentage: float


class DifficultyDistributionSchema(_FromDomain):
    by_status: list[StatusShareSchema]
    by_mastery: list[MasteryRangeShareSchema]
    average_difficulty: float


class WordPerformanceEntrySchema(_FromDomain):
    user_word_id: int
    word_text: str
    mastery_score: float
    correct_streak: int
    srs_level: int
    mistake_count: int
    skip_count: int
    average_response_time: float


class WordPerformanceSchema(_FromDomain):
    average_correct_streak: float
    longest_correct_streak: int
    total_skips: int
    average_skips_per_word: float
    average_mastery_score: float
    top_words: list[WordPerformanceEntrySchema]
    struggling_words: list[WordPerformanceEntrySchema]


class PerformanceScoresSchema(_FromDomain):
    overall_score: float = Field(..., ge=0, le=10)
    mistake_rate_score: float
    streak_score: float
    response_time_score: float
    skip_score: float
    srs_progression_score: float
    improvement_score: float


class PerformanceMetricsResponse(_FromDomain):
    learning_efficiency: LearningEfficiencySchema
    practice: PracticePerformanceSchema
    mistakes: MistakeAnalysisSchema
    study_habits: StudyHabitsSchema
    vocabulary: VocabularyManagementSchema
    review_system: ReviewSystemSchema
    difficulty: DifficultyDistributionSchema
    word_performance: WordPerformanceSchema
    scores: PerformanceScoresSchema

    @classmethod
    def from_domain(cls, metrics: PerformanceMetrics) -> "PerformanceMetricsResponse":
        return cls.model_validate(metrics)


# Words needing attention


class AttentionItemResponse(_FromDomain):
    user_word_id: int
    word_text: str
    difficulty_score: int = Field(..., ge=0, le=100)
    urgency: UrgencyLevel
    primary_issue: str
    recommended_action: str

    @classmethod
    def from_domain(cls, item: AttentionItem) -> "AttentionItemResponse":
        return cls.model_validate(item)
