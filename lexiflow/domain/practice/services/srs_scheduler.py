"""Domain service for spaced-repetition scheduling over a user's dictionary."""

import math
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta

from lexiflow.domain.practice.services.progression_service import ProgressionService
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.utils import round_to

DEFAULT_REVIEW_LIMIT = 20
DEFAULT_SCHEDULE_DAYS = 7
DEFAULT_SESSION_WORDS = 20
OVERDUE_SHARE_WITHOUT_PRIORITY = 0.7
DUE_SOON_SHARE = 0.7
MAX_STREAK_DAYS = 30


@dataclass
class ScheduledReview:
    user_word: UserWord
    priority: str


@dataclass
class ReviewStatistics:
    total_words: int
    overdue: int
    due_today: int
    due_tomorrow: int
    level_distribution: dict[int, int]
    average_interval: float
    review_accuracy: float
    streak_days: int


@dataclass
class ReviewSessionPlan:
    words: list[UserWord]
    overdue_count: int
    due_count: int
    new_count: int

    @property
    def total(self) -> int:
        return len(self.words)


@dataclass
class RecalculationResult:
    updated: list[UserWord] = field(default_factory=list)

    @property
    def updated_count(self) -> int:
        return len(self.updated)


def _end_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.max, tzinfo=moment.tzinfo)


def _by_next_review(user_word: UserWord) -> tuple[bool, datetime, int]:
    # Unscheduled words sort after scheduled ones
    scheduled = user_word.next_srs_review
    return (scheduled is None, scheduled or datetime.min, user_word.srs_level)


class SrsScheduler:
    """Stateless scheduling rules. Callers pass the user's active entries."""

    @staticmethod
    def due_words(
        user_words: list[UserWord], now: datetime, limit: int = DEFAULT_REVIEW_LIMIT
    ) -> list[UserWord]:
        """Entries due now or never scheduled, earliest first."""
        due = [word for word in user_words if not word.is_deleted and word.is_due(now)]
        return sorted(due, key=_by_next_review)[:limit]

    @staticmethod
    def review_schedule(
        user_words: list[UserWord], now: datetime, days: int = DEFAULT_SCHEDULE_DAYS
    ) -> dict[str, list[ScheduledReview]]:
        """Group scheduled reviews inside the window by ISO date."""
        horizon = now + timedelta(days=days)
        day_ahead = now + timedelta(hours=24)
        schedule: dict[str, list[ScheduledReview]] = defaultdict(list)

        scheduled = [
            word
            for word in user_words
            if not word.is_deleted
            and word.next_srs_review is not None
            and word.next_srs_review <= horizon
        ]
        for word in sorted(scheduled, key=_by_next_review):
            review_at = word.next_srs_review or now
            if review_at <= now:
                priority = "overdue"
            elif review_at <= day_ahead:
                priority = "due"
            else:
                priority = "upcoming"
            schedule[review_at.date().isoformat()].append(
                ScheduledReview(user_word=word, priority=priority)
            )
        return dict(schedule)

    @staticmethod
    def statistics(user_words: list[UserWord], now: datetime) -> ReviewStatistics:
        active = [word for word in user_words if not word.is_deleted]
        end_of_today = _end_of_day(now)
        end_of_tomorrow = end_of_today + timedelta(days=1)

        overdue = due_today = due_tomorrow = 0
        for word in active:
            review_at = word.next_srs_review
            if review_at is None:
                continue
            if review_at <= now:
                overdue += 1
            elif review_at <= end_of_today:
                due_today += 1
            elif review_at <= end_of_tomorrow:
                due_tomorrow += 1

        levels = Counter(word.srs_level for word in active)
        average_interval = (
            sum(word.srs_interval for word in active) / len(active) if active else 0.0
        )
        review_accuracy = (
            sum(word.mastery_score for word in active) / len(active) if active else 0.0
        )
        streak_days = min(
            sum(1 for word in active if word.last_srs_success is True), MAX_STREAK_DAYS
        )

        return ReviewStatistics(
            total_words=len(active),
            overdue=overdue,
            due_today=due_today,
            due_tomorrow=due_tomorrow,
            level_distribution=dict(sorted(levels.items())),
            average_interval=round_to(average_interval, 2),
            review_accuracy=round_to(review_accuracy, 2),
            streak_days=streak_days,
        )

    @staticmethod
    def recalculate_intervals(
        user_words: list[UserWord], now: datetime, recalculate_all: bool = False
    ) -> RecalculationResult:
        """Give every unscheduled entry (or every entry) an interval and next review."""
        result = RecalculationResult()
        for word in user_words:
            if word.is_deleted:
                continue
            if not recalculate_all and word.next_srs_review is not None:
                continue
            interval = ProgressionService.calculate_srs_interval(
                word.srs_level, bool(word.last_srs_success), word.correct_streak, now
            )
            word.schedule_review(interval.hours, now)
            result.updated.append(word)
        return result

    @staticmethod
    def compose_review_session(
        user_words: list[UserWord],
        now: datetime,
        max_words: int = DEFAULT_SESSION_WORDS,
        prioritize_overdue: bool = True,
    ) -> ReviewSessionPlan:
        """
        Fill a review session: overdue first, then words due within a day,
        then never-reviewed words in the order they were added.
        """
        active = [word for word in user_words if not word.is_deleted]
        overdue_limit = (
            max_words
            if prioritize_overdue
            else math.floor(max_words * OVERDUE_SHARE_WITHOUT_PRIORITY)
        )
        overdue = sorted(
            (w for w in active if w.next_srs_review is not None and w.next_srs_review <= now),
            key=_by_next_review,
        )[:overdue_limit]

        remaining = max_words - len(overdue)
        day_ahead = now + timedelta(days=1)
        due_soon = sorted(
            (
                w
                for w in active
                if w.next_srs_review is not None and now < w.next_srs_review <= day_ahead
            ),
            key=_by_next_review,
        )[: max(math.floor(remaining * DUE_SOON_SHARE), 0)]

        remaining_new = max(remaining - len(due_soon), 0)
        new_words = sorted(
            (w for w in active if w.next_srs_review is None and w.review_count == 0),
            key=lambda w: (w.created_at is None, w.created_at or datetime.min, w.id.value),
        )[:remaining_new]

        return ReviewSessionPlan(
            words=[*overdue, *due_soon, *new_words],
            overdue_count=len(overdue),
            due_count=len(due_soon),
            new_count=len(new_words),
        )
