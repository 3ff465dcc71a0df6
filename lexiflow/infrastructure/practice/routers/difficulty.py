import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from lexiflow.application.practice.use_cases.difficulty_assessment_use_case import (
    DifficultyAssessmentUseCase,
)
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.identity.entities.user import User
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.practice.schemas import (
    BatchAssessmentRequest,
    BatchAssessmentResponse,
    DifficultyAssessmentResponse,
    WordSelectionRequest,
    WordSelectionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/difficulty", tags=["difficulty"])


@router.get("/words/{user_word_id}", response_model=DifficultyAssessmentResponse)
def assess_word(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DifficultyAssessmentUseCase = Depends(
        inject_use_case(container.difficulty_assessment_use_case)
    ),
) -> DifficultyAssessmentResponse:
    """
    Assess how hard a dictionary entry is for you.

    The composite score blends your performance on the word with
    linguistic features of the word itself.
    """
    return DifficultyAssessmentResponse.from_domain(
        use_case.assess_word(current_user.id.value, user_word_id)
    )


@router.post("/words", response_model=BatchAssessmentResponse)
def assess_words(
    request: BatchAssessmentRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DifficultyAssessmentUseCase = Depends(
        inject_use_case(container.difficulty_assessment_use_case)
    ),
) -> BatchAssessmentResponse:
    try:
        assessments = use_case.assess_words(current_user.id.value, request.user_word_ids)
        return BatchAssessmentResponse.from_domain(assessments)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to assess words for user {current_user.id.value}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/select", response_model=WordSelectionResponse)
def select_words(
    request: WordSelectionRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DifficultyAssessmentUseCase = Depends(
        inject_use_case(container.difficulty_assessment_use_case)
    ),
) -> WordSelectionResponse:
    """Pick a practice set balanced across hard, medium and easy words."""
    try:
        selection = use_case.select_words(
            current_user.id.value,
            request.target_count,
            distribution=request.distribution,
            exclude_recent=request.exclude_recent,
        )
        return WordSelectionResponse.from_domain(selection)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to select words for user {current_user.id.value}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
