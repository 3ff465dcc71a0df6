"""Analytics context schemas."""

from lexiflow.infrastructure.analytics.schemas.learner_report_schemas import (
    AttentionItemResponse,
    LearnerStatisticsResponse,
    LearningAnalyticsResponse,
    PerformanceMetricsResponse,
)
from lexiflow.infrastructure.analytics.schemas.word_analytics_schemas import WordAnalyticsResponse

__all__ = [
    "AttentionItemResponse",
    "LearnerStatisticsResponse",
    "LearningAnalyticsResponse",
    "PerformanceMetricsResponse",
    "WordAnalyticsResponse",
]
