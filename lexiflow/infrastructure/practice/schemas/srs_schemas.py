"""Pydantic schemas for spaced repetition reviews."""

from pydantic import BaseModel, Field

from lexiflow.domain.practice.services.srs_scheduler import (
    RecalculationResult,
    ReviewSessionPlan,
    ReviewStatistics,
    ScheduledReview,
)
from lexiflow.infrastructure.vocabulary.schemas import UserWordResponse


class DueWordsResponse(BaseModel):
    words: list[UserWordResponse]
    total: int


class ScheduledReviewResponse(BaseModel):
    user_word: UserWordResponse
    priority: str = Field(..., description="overdue, due or upcoming")

    @classmethod
    def from_domain(cls, review: ScheduledReview) -> "ScheduledReviewResponse":
        return cls(user_word=UserWordResponse.from_domain(review.user_word), priority=review.priority)


class ReviewScheduleResponse(BaseModel):
    """Upcoming reviews grouped by ISO date."""

    days: int
    schedule: dict[str, list[ScheduledReviewResponse]]

    @classmethod
    def from_schedule(
        cls, days: int, schedule: dict[str, list[ScheduledReview]]
    ) -> "ReviewScheduleResponse":
        return cls(
            days=days,
            schedule={
                day: [ScheduledReviewResponse.from_domain(review) for review in reviews]
                for day, reviews in schedule.items()
            },
        )


class ReviewStatisticsResponse(BaseModel):
    total_words: int
    overdue: int
    due_today: int
    due_tomorrow: int
    level_distribution: dict[int, int]
    average_interval: float = Field(..., description="Hours")
    review_accuracy: float
    streak_days: int

    @classmethod
    def from_domain(cls, stats: ReviewStatistics) -> "ReviewStatisticsResponse":
        return cls(
            total_words=stats.total_words,
            overdue=stats.overdue,
            due_today=stats.due_today,
            due_tomorrow=stats.due_tomorrow,
            level_distribution=stats.level_distribution,
            average_interval=stats.average_interval,
            review_accuracy=stats.review_accuracy,
            streak_days=stats.streak_days,
        )


class RecalculateRequest(BaseModel):
    recalculate_all: bool = False


class RecalculateResponse(BaseModel):
    updated_count: int
    words: list[UserWordResponse]

    @classmethod
    def from_domain(cls, result: RecalculationResult) -> "RecalculateResponse":
        return cls(
            updated_count=result.updated_count,
            words=[UserWordResponse.from_domain(word) for word in result.updated],
        )


class ReviewSessionRequest(BaseModel):
    max_words: int | None = Field(None, ge=1, le=100)
    prioritize_overdue: bool = True


class ReviewSessionResponse(BaseModel):
    words: list[UserWordResponse]
    overdue_count: int
    due_count: int
    new_count: int
    total: int

    @classmethod
    def from_domain(cls, plan: ReviewSessionPlan) -> "ReviewSessionResponse":
        return cls(
            words=[UserWordResponse.from_domain(word) for word in plan.words],
            overdue_count=plan.overdue_count,
            due_count=plan.due_count,
            new_count=plan.new_count,
            total=plan.total,
        )
