"""
Result types of the learner-level reports: overall statistics, activity
analytics over a period, dictionary performance and words needing attention.

Percentages are 0..100, response times are milliseconds and durations are
minutes unless the field name says otherwise. Scores named ``*_score`` inside
``PerformanceScores`` are on a 0..10 scale.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.practice.value_objects import MistakeType, SessionType
from lexiflow.domain.vocabulary.value_objects import LearningStatus


class ProficiencyLevel(str, Enum):
    BEGINNER = "beginner"
    ELEMENTARY = "elementary"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    PROFICIENT = "proficient"


class PerformanceTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class UrgencyLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Learner statistics


@dataclass
class LearningProgress:
    total_words: int
    words_learned: int
    words_in_progress: int
    words_needing_review: int
    difficult_words: int
    average_mastery_score: float
    current_streak: int
    longest_streak: int
    progress_percentage: float


@dataclass
class SessionStatistics:
    total_sessions: int
    total_study_minutes: int
    average_session_minutes: int
    total_words_studied: int
    average_accuracy: float
    best_score: float
    recent_sessions: int
    last_session_at: datetime | None


@dataclass
class ProblemWord:
    user_word_id: int
    word_text: str
    mistake_count: int
    last_mistake_at: datetime | None = None
    mistake_types: list[MistakeType] = field(default_factory=list)


@dataclass
class MistakeSummary:
    total_mistakes: int
    most_common_type: MistakeType | None
    # Change in words studied per session, last five sessions against the five before
    improvement_rate: float
    problem_words: list[ProblemWord]


@dataclass
class GoalProgress:
    daily_goal: int
    words_today: int
    words_this_week: int
    words_this_month: int
    goal_achievement_rate: float


@dataclass
class LanguageProgress:
    base_language_code: LanguageCode
    target_language_code: LanguageCode | None
    proficiency_level: ProficiencyLevel
    estimated_vocabulary_size: int


@dataclass
class LearnerStatistics:
    learning_progress: LearningProgress
    sessions: SessionStatistics
    mistakes: MistakeSummary
    goal_progress: GoalProgress
    language_progress: LanguageProgress


# Learning analytics over a period


@dataclass
class DailyActivity:
    day: date
    words_studied: int
    accuracy: float


@dataclass
class MistakeTypeCount:
    mistake_type: MistakeType
    count: int
    percentage: float = 0.0


@dataclass
class WeekdayActivity:
    day: str
    sessions: int
    average_minutes: float = 0.0


@dataclass
class VocabularyGrowthPoint:
    day: date
    total_words: int


@dataclass
class LearningPatterns:
    most_active_hour: int
    average_session_minutes: float
    preferred_session_type: SessionType
    weekly_distribution: list[WeekdayActivity]


@dataclass
class LearningAnalytics:
    days: int
    daily_progress: list[DailyActivity]
    mistakes_by_type: list[MistakeTypeCount]
    patterns: LearningPatterns
    vocabulary_growth: list[VocabularyGrowthPoint]


# Dictionary performance


@dataclass
class LearningEfficiency:
    average_days_to_master: float
    words_learned_this_week: int
    # Share of entries that reached ``learned`` and are still there
    retention_rate: float
    # Words learned per day over the last 30 days
    learning_velocity: float


@dataclass
class PracticePerformance:
    total_sessions: int = 0
    average_accuracy: float = 0.0
    average_response_time: float = 0.0
    fastest_response_time: int = 0
    slowest_response_time: int = 0
    consistency_score: float = 0.0
    response_time_consistency: float = 0.0
    trend: PerformanceTrend = PerformanceTrend.STABLE
    recent_sessions: int = 0
    best_score: float = 0.0
    average_session_minutes: float = 0.0


@dataclass
class MistakeAnalysis:
    total_mistakes: int = 0
    mistakes_per_study_day: float = 0.0
    problem_words: list[ProblemWord] = field(default_factory=list)
    by_type: list[MistakeTypeCount] = field(default_factory=list)
    average_mistakes_per_word: float = 0.0
    highest_mistake_word: ProblemWord | None = None


@dataclass
class StudyHabits:
    current_streak: int
    longest_streak: int
    average_session_minutes: float
    preferred_hour: int
    # Days studied among the last 30
    study_consistency: float
    weekly_pattern: list[WeekdayActivity]


@dataclass
class VocabularyManagement:
    words_added_this_week: int
    words_added_this_month: int
    favorite_words: int
    modified_words: int
    words_with_notes: int


@dataclass
class SrsLevelShare:
    level: int
    count: int
    percentage: float


@dataclass
class ReviewSystem:
    words_needing_review: int
    overdue_srs_words: int
    average_srs_level: float
    srs_distribution: list[SrsLevelShare]
    next_review_due: datetime | None


@dataclass
class StatusShare:
    learning_status: LearningStatus
    count: int
    percentage: float


@dataclass
class MasteryRangeShare:
    label: str
    count: int
    percentage: float


@dataclass
class DifficultyDistribution:
    by_status: list[StatusShare]
    by_mastery: list[MasteryRangeShare]
    average_difficulty: float


@dataclass
class WordPerformanceEntry:
    user_word_id: int
    word_text: str
    mastery_score: float
    correct_streak: int
    srs_level: int
    mistake_count: int
    skip_count: int
    average_response_time: float = 0.0


@dataclass
class WordPerformance:
    average_correct_streak: float = 0.0
    longest_correct_streak: int = 0
    total_skips: int = 0
    average_skips_per_word: float = 0.0
    average_mastery_score: float = 0.0
    top_words: list[WordPerformanceEntry] = field(default_factory=list)
    struggling_words: list[WordPerformanceEntry] = field(default_factory=list)


@dataclass
class PerformanceScores:
    overall_score: float = 0.0
    mistake_rate_score: float = 0.0
    streak_score: float = 0.0
    response_time_score: float = 0.0
    skip_score: float = 0.0
    srs_progression_score: float = 0.0
    improvement_score: float = 0.0


@dataclass
class PerformanceMetrics:
    learning_efficiency: LearningEfficiency
    practice: PracticePerformance
    mistakes: MistakeAnalysis
    study_habits: StudyHabits
    vocabulary: VocabularyManagement
    review_system: ReviewSystem
    difficulty: DifficultyDistribution
    word_performance: WordPerformance
    scores: PerformanceScores


# Words needing attention


@dataclass
class WordDifficulty:
    """How hard one practiced entry is proving, on a 0..100 scale."""

    user_word_id: int
    word_text: str
    difficulty_score: int
    mistake_rate: float
    mistake_count: int
    total_attempts: int
    consistency_score: int
    recent_performance: int
    mastery_score: float
    learning_status: LearningStatus
    mistake_types: dict[MistakeType, int]


@dataclass
class AttentionItem:
    user_word_id: int
    word_text: str
    difficulty_score: int
    urgency: UrgencyLevel
    primary_issue: str
    recommended_action: str
