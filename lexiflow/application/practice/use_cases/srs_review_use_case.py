"""Use case for spaced-repetition reviews."""

import structlog

from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.config import get_settings
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.practice.services.srs_scheduler import (
    DEFAULT_SCHEDULE_DAYS,
    RecalculationResult,
    ReviewSessionPlan,
    ReviewStatistics,
    ScheduledReview,
    SrsScheduler,
)
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.utils import utc_now

logger = structlog.get_logger(__name__)

MAX_SCHEDULE_DAYS = 90


class SrsReviewUseCase:
    def __init__(self, user_word_repository: UserWordRepositoryProtocol) -> None:
        self.user_word_repository = user_word_repository

    def get_due_words(self, user_id: int, limit: int | None = None) -> list[UserWord]:
        """Entries due for review now, earliest first (SRS_REVIEW_BATCH_SIZE by default)."""
        batch = limit if limit is not None else get_settings().SRS_REVIEW_BATCH_SIZE
        if batch < 1:
            raise ValidationError("Limit must be at least 1", field="limit", value=batch)
        entries = self.user_word_repository.find_active(UserId(user_id))
        return SrsScheduler.due_words(entries, utc_now(), batch)

    def get_schedule(
        self, user_id: int, days: int = DEFAULT_SCHEDULE_DAYS
    ) -> dict[str, list[ScheduledReview]]:
        if not 1 <= days <= MAX_SCHEDULE_DAYS:
            raise ValidationError(
                f"Days must be between 1 and {MAX_SCHEDULE_DAYS}", field="days", value=days
            )
        entries = self.user_word_repository.find_active(UserId(user_id))
        return SrsScheduler.review_schedule(entries, utc_now(), days)

    def get_statistics(self, user_id: int) -> ReviewStatistics:
        entries = self.user_word_repository.find_active(UserId(user_id))
        return SrsScheduler.statistics(entries, utc_now())

    def recalculate(self, user_id: int, recalculate_all: bool = False) -> RecalculationResult:
        """
        Fill in intervals and review dates for entries without a schedule.

        Args:
            user_id: ID of the user
            recalculate_all: Reschedule every entry, not only unscheduled ones

        Returns:
            The entries that were rescheduled
        """
        entries = self.user_word_repository.find_active(UserId(user_id))
        result = SrsScheduler.recalculate_intervals(entries, utc_now(), recalculate_all)
        result.updated = [self.user_word_repository.save(entry) for entry in result.updated]

        logger.info(
            "srs_intervals_recalculated",
            user_id=user_id,
            updated_count=result.updated_count,
            recalculate_all=recalculate_all,
        )
        return result

    def compose_session(
        self, user_id: int, max_words: int | None = None, prioritize_overdue: bool = True
    ) -> ReviewSessionPlan:
        size = max_words if max_words is not None else get_settings().SRS_REVIEW_BATCH_SIZE
        if size < 1:
            raise ValidationError("max_words must be at least 1", field="max_words", value=size)
        entries = self.user_word_repository.find_active(UserId(user_id))
        return SrsScheduler.compose_review_session(entries, utc_now(), size, prioritize_overdue)
