"""Use cases for the learner-level reports."""

from collections import defaultdict
from datetime import timedelta

import structlog

from lexiflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from lexiflow.application.practice.protocols.learning_mistake_repository import (
    LearningMistakeRepositoryProtocol,
)
from lexiflow.application.practice.protocols.learning_session_repository import (
    LearningSessionRepositoryProtocol,
)
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.domain.analytics.learner_reports import (
    AttentionItem,
    LearnerStatistics,
    LearningAnalytics,
    PerformanceMetrics,
)
from lexiflow.domain.analytics.services.learner_statistics_service import LearnerStatisticsService
from lexiflow.domain.analytics.services.performance_metrics_service import (
    PERFORMANCE_WINDOW_DAYS,
    PerformanceMetricsService,
)
from lexiflow.domain.analytics.services.word_attention_service import (
    DEFAULT_ATTENTION_LIMIT,
    WordAttentionService,
)
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import UserNotFoundError
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.utils import utc_now

logger = structlog.get_logger(__name__)

MAX_ANALYTICS_DAYS = 365


class LearnerStatisticsUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        user_word_repository: UserWordRepositoryProtocol,
        session_repository: LearningSessionRepositoryProtocol,
        mistake_repository: LearningMistakeRepositoryProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.user_word_repository = user_word_repository
        self.session_repository = session_repository
        self.mistake_repository = mistake_repository

    def _get_user(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def get_statistics(self, user_id: int) -> LearnerStatistics:
        """
        Overall progress, session totals, mistakes, daily goal and language level.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self._get_user(user_id)
        user_id_vo = UserId(user_id)
        entries = self.user_word_repository.find_active(user_id_vo)
        sessions = self.session_repository.find_all(user_id_vo)
        mistakes = self.mistake_repository.find_by_user(user_id_vo)

        report = LearnerStatisticsService.build(user, entries, sessions, mistakes, utc_now())
        logger.debug(
            "learner_statistics_built",
            user_id=user_id,
            entries=len(entries),
            sessions=len(sessions),
            mistakes=len(mistakes),
        )
        return report

    def get_learning_analytics(self, user_id: int, days: int = 30) -> LearningAnalytics:
        """
        Daily activity, mistake types, study patterns and vocabulary growth
        over the last ``days`` days.

        Raises:
            ValidationError: If ``days`` is outside 1..365
        """
        if not 1 <= days <= MAX_ANALYTICS_DAYS:
            raise ValidationError(
                f"days must be between 1 and {MAX_ANALYTICS_DAYS}", field="days", value=days
            )
        user_id_vo = UserId(user_id)
        now = utc_now()
        entries = self.user_word_repository.find_active(user_id_vo)
        sessions = self.session_repository.find_all(user_id_vo)
        mistakes = self.mistake_repository.find_by_user(user_id_vo, now - timedelta(days=days))

        analytics = LearnerStatisticsService.analytics(entries, sessions, mistakes, days, now)
        logger.debug(
            "learning_analytics_built",
            user_id=user_id,
            days=days,
            active_days=len(analytics.daily_progress),
        )
        return analytics

    def get_performance_metrics(self, user_id: int) -> PerformanceMetrics:
        """Dictionary performance over the last 90 days of practice."""
        user_id_vo = UserId(user_id)
        now = utc_now()
        since = now - timedelta(days=PERFORMANCE_WINDOW_DAYS)
        entries = self.user_word_repository.find_active(user_id_vo)
        sessions = [
            session
            for session in self.session_repository.find_all(user_id_vo)
            if session.start_time >= since
        ]
        mistakes = self.mistake_repository.find_by_user(user_id_vo, since)
        item_statistics = self.session_repository.item_statistics(user_id_vo)

        metrics = PerformanceMetricsService.build(
            entries, sessions, mistakes, item_statistics, now
        )
        logger.debug(
            "performance_metrics_built",
            user_id=user_id,
            entries=len(entries),
            sessions=len(sessions),
            overall_score=metrics.scores.overall_score,
        )
        return metrics

    def get_words_needing_attention(
        self, user_id: int, limit: int = DEFAULT_ATTENTION_LIMIT
    ) -> list[AttentionItem]:
        """Practiced words with a high difficulty score, most urgent first."""
        user_id_vo = UserId(user_id)
        entries = [
            entry
            for entry in self.user_word_repository.find_active(user_id_vo)
            if entry.review_count > 0
        ]
        by_entry: dict[int, list[LearningMistake]] = defaultdict(list)
        for mistake in self.mistake_repository.find_by_user(user_id_vo):
            by_entry[mistake.user_word_id.value].append(mistake)

        items = WordAttentionService.needing_attention(entries, by_entry, limit)
        logger.info(
            "words_needing_attention_listed",
            user_id=user_id,
            analyzed=len(entries),
            flagged=len(items),
        )
        return items
