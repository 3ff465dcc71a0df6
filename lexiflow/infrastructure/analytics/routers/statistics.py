import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiflow.application.analytics.use_cases.learner_statistics_use_case import (
    LearnerStatisticsUseCase,
)
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.identity.entities.user import User
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.analytics.schemas import (
    AttentionItemResponse,
    LearnerStatisticsResponse,
    LearningAnalyticsResponse,
    PerformanceMetricsResponse,
)
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.identity.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/statistics", tags=["statistics"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("", response_model=LearnerStatisticsResponse)
def get_statistics(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearnerStatisticsUseCase = Depends(
        inject_use_case(container.learner_statistics_use_case)
    ),
) -> LearnerStatisticsResponse:
    """
    Get your overall learning statistics.

    Covers dictionary progress and streaks, session totals, mistakes, the
    daily goal and an estimate of your level.
    """
    try:
        return LearnerStatisticsResponse.from_domain(
            use_case.get_statistics(current_user.id.value)
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"build statistics for user {current_user.id.value}", e) from e


@router.get("/analytics", response_model=LearningAnalyticsResponse)
def get_learning_analytics(
    current_user: Annotated[User, Depends(get_current_user)],
    days: int = Query(30, ge=1, le=365, description="Length of the period in days"),
    use_case: LearnerStatisticsUseCase = Depends(
        inject_use_case(container.learner_statistics_use_case)
    ),
) -> LearningAnalyticsResponse:
    """Daily activity, mistake types, study patterns and vocabulary growth over a period."""
    try:
        return LearningAnalyticsResponse.from_domain(
            use_case.get_learning_analytics(current_user.id.value, days)
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"build analytics for user {current_user.id.value}", e) from e


@router.get("/performance", response_model=PerformanceMetricsResponse)
def get_performance_metrics(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearnerStatisticsUseCase = Depends(
        inject_use_case(container.learner_statistics_use_case)
    ),
) -> PerformanceMetricsResponse:
    """
    Dictionary performance over the last 90 days with 0..10 component scores
    and a weighted overall score.
    """
    try:
        return PerformanceMetricsResponse.from_domain(
            use_case.get_performance_metrics(current_user.id.value)
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"build performance metrics for user {current_user.id.value}", e) from e


@router.get("/attention", response_model=list[AttentionItemResponse])
def get_words_needing_attention(
    current_user: Annotated[User, Depends(get_current_user)],
    limit: int = Query(20, ge=1, le=100),
    use_case: LearnerStatisticsUseCase = Depends(
        inject_use_case(container.learner_statistics_use_case)
    ),
) -> list[AttentionItemResponse]:
    """Practiced words that keep going wrong, most urgent first."""
    try:
        items = use_case.get_words_needing_attention(current_user.id.value, limit)
        return [AttentionItemResponse.from_domain(item) for item in items]
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(
            f"list words needing attention for user {current_user.id.value}", e
        ) from e
