"""Use case for per-learner word difficulty."""

import structlog

from lexiflow.application.practice.protocols.learning_session_repository import (
    LearningSessionRepositoryProtocol,
)
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.config import get_settings
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import UserId, UserWordId
from lexiflow.domain.practice.services.difficulty_assessor import (
    DifficultyAssessment,
    DifficultyAssessor,
    WordSelection,
)
from lexiflow.domain.vocabulary.exceptions import UserWordNotFoundError
from lexiflow.utils import utc_now

logger = structlog.get_logger(__name__)


class DifficultyAssessmentUseCase:
    def __init__(
        self,
        user_word_repository: UserWordRepositoryProtocol,
        session_repository: LearningSessionRepositoryProtocol,
        difficulty_assessor: DifficultyAssessor | None = None,
    ) -> None:
        self.user_word_repository = user_word_repository
        self.session_repository = session_repository
        self.difficulty_assessor = difficulty_assessor or DifficultyAssessor()

    def assess_word(self, user_id: int, user_word_id: int) -> DifficultyAssessment:
        user_id_vo = UserId(user_id)
        user_word = self.user_word_repository.find_by_id(UserWordId(user_word_id), user_id_vo)
        if not user_word:
            raise UserWordNotFoundError(user_word_id)

        count, average_time = self.session_repository.item_statistics(user_id_vo).get(
            user_word_id, (0, None)
        )
        return self.difficulty_assessor.assess(user_word, utc_now(), count, average_time)

    def assess_words(
        self, user_id: int, user_word_ids: list[int] | None = None
    ) -> dict[int, DifficultyAssessment]:
        """Assess several entries at once (every active entry when no ids are given)."""
        user_id_vo = UserId(user_id)
        ids = [UserWordId(value) for value in user_word_ids] if user_word_ids else None
        entries = self.user_word_repository.find_active(user_id_vo, ids)
        stats = self.session_repository.item_statistics(user_id_vo)
        return self.difficulty_assessor.assess_batch(
            entries,
            utc_now(),
            {word_id: value[0] for word_id, value in stats.items()},
            {word_id: value[1] for word_id, value in stats.items()},
        )

    def select_words(
        self,
        user_id: int,
        target_count: int,
        distribution: dict[str, float] | None = None,
        exclude_recent: bool = True,
    ) -> WordSelection:
        """
        Pick a practice set balanced across hard, medium and easy words.

        Raises:
            ValidationError: If the target count or distribution is invalid
        """
        if target_count < 1:
            raise ValidationError(
                "Target count must be at least 1", field="target_count", value=target_count
            )
        if distribution is not None:
            unknown = set(distribution) - {"hard", "medium", "easy"}
            if unknown or any(share < 0 for share in distribution.values()):
                raise ValidationError(
                    "Distribution takes non-negative hard, medium and easy shares",
                    field="distribution",
                )

        user_id_vo = UserId(user_id)
        entries = self.user_word_repository.find_active(user_id_vo)
        stats = self.session_repository.item_statistics(user_id_vo)
        selection = self.difficulty_assessor.select_words(
            entries,
            target_count,
            utc_now(),
            distribution=distribution,
            exclude_recent_hours=(
                get_settings().RECENT_REVIEW_EXCLUSION_HOURS if exclude_recent else None
            ),
            session_item_counts={word_id: value[0] for word_id, value in stats.items()},
            response_times={word_id: value[1] for word_id, value in stats.items()},
        )

        logger.info(
            "practice_words_selected",
            user_id=user_id,
            requested=target_count,
            selected=len(selection.words),
        )
        return selection
