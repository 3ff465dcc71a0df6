from .learner_statistics_use_case import LearnerStatisticsUseCase
from .word_analytics_use_case import WordAnalyticsUseCase

__all__ = ["LearnerStatisticsUseCase", "WordAnalyticsUseCase"]
