import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiflow.application.practice.use_cases.srs_review_use_case import SrsReviewUseCase
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.identity.entities.user import User
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.practice.schemas import (
    DueWordsResponse,
    RecalculateRequest,
    RecalculateResponse,
    ReviewScheduleResponse,
    ReviewSessionRequest,
    ReviewSessionResponse,
    ReviewStatisticsResponse,
)
from lexiflow.infrastructure.vocabulary.schemas import UserWordResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/srs", tags=["srs"])


@router.get("/due", response_model=DueWordsResponse)
def get_due_words(
    current_user: Annotated[User, Depends(get_current_user)],
    limit: int | None = Query(None, ge=1, le=100),
    use_case: SrsReviewUseCase = Depends(inject_use_case(container.srs_review_use_case)),
) -> DueWordsResponse:
    """Entries due for review now, earliest first. Never-scheduled entries count as due."""
    try:
        words = use_case.get_due_words(current_user.id.value, limit)
        return DueWordsResponse(
            words=[UserWordResponse.from_domain(word) for word in words], total=len(words)
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to get due words for user {current_user.id.value}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/schedule", response_model=ReviewScheduleResponse)
def get_review_schedule(
    current_user: Annotated[User, Depends(get_current_user)],
    days: int = Query(7, ge=1, le=90),
    use_case: SrsReviewUseCase = Depends(inject_use_case(container.srs_review_use_case)),
) -> ReviewScheduleResponse:
    schedule = use_case.get_schedule(current_user.id.value, days)
    return ReviewScheduleResponse.from_schedule(days, schedule)


@router.get("/statistics", response_model=ReviewStatisticsResponse)
def get_review_statistics(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: SrsReviewUseCase = Depends(inject_use_case(container.srs_review_use_case)),
) -> ReviewStatisticsResponse:
    return ReviewStatisticsResponse.from_domain(use_case.get_statistics(current_user.id.value))


@router.post("/recalculate", response_model=RecalculateResponse)
def recalculate_schedule(
    request: RecalculateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: SrsReviewUseCase = Depends(inject_use_case(container.srs_review_use_case)),
) -> RecalculateResponse:
    """Schedule entries that have no review date yet, or every entry with recalculate_all."""
    try:
        result = use_case.recalculate(current_user.id.value, request.recalculate_all)
        return RecalculateResponse.from_domain(result)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to recalculate schedule for user {current_user.id.value}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/session", response_model=ReviewSessionResponse)
def compose_review_session(
    request: ReviewSessionRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: SrsReviewUseCase = Depends(inject_use_case(container.srs_review_use_case)),
) -> ReviewSessionResponse:
    """Pick words for a review session: overdue first, then due, then new."""
    plan = use_case.compose_session(
        current_user.id.value, request.max_words, request.prioritize_overdue
    )
    return ReviewSessionResponse.from_domain(plan)
