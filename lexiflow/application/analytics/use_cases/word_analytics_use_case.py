"""Use case for the per-word analytics report."""

import structlog

from lexiflow.application.practice.protocols.learning_mistake_repository import (
    LearningMistakeRepositoryProtocol,
)
from lexiflow.application.practice.protocols.learning_session_repository import (
    LearningSessionRepositoryProtocol,
)
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.domain.analytics.services.word_analytics_service import WordAnalyticsService
from lexiflow.domain.analytics.word_analytics import WordAnalytics
from lexiflow.domain.common.value_objects.ids import UserId, UserWordId
from lexiflow.domain.vocabulary.exceptions import UserWordNotFoundError
from lexiflow.utils import utc_now

logger = structlog.get_logger(__name__)


class WordAnalyticsUseCase:
    def __init__(
        self,
        user_word_repository: UserWordRepositoryProtocol,
        session_repository: LearningSessionRepositoryProtocol,
        mistake_repository: LearningMistakeRepositoryProtocol,
    ) -> None:
        self.user_word_repository = user_word_repository
        self.session_repository = session_repository
        self.mistake_repository = mistake_repository

    def get_word_analytics(self, user_id: int, user_word_id: int) -> WordAnalytics:
        """
        Build the analytics report for one dictionary entry.

        Args:
            user_id: ID of the user
            user_word_id: The entry to analyze

        Returns:
            Metrics, predictions, insights and timeline for the entry

        Raises:
            UserWordNotFoundError: If the entry does not exist
        """
        user_id_vo = UserId(user_id)
        user_word_id_vo = UserWordId(user_word_id)

        user_word = self.user_word_repository.find_by_id(user_word_id_vo, user_id_vo)
        if not user_word:
            raise UserWordNotFoundError(user_word_id)

        items = self.session_repository.find_items_by_user_word(user_word_id_vo, user_id_vo)
        mistakes = self.mistake_repository.find_by_user_word(user_word_id_vo, user_id_vo)

        analytics = WordAnalyticsService.analyze(user_word, items, mistakes, utc_now())

        logger.debug(
            "word_analytics_built",
            user_id=user_id,
            user_word_id=user_word_id,
            items=len(items),
            mistakes=len(mistakes),
        )
        return analytics
