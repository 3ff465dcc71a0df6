import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiflow.application.analytics.use_cases.word_analytics_use_case import (
    WordAnalyticsUseCase,
)
from lexiflow.application.vocabulary.dtos import SortOrder, UserWordFilters, UserWordSortField
from lexiflow.application.vocabulary.use_cases.user_dictionary_use_case import (
    UserDictionaryUseCase,
)
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.dictionary.value_objects import PartOfSpeech
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.vocabulary.exceptions import WordAlreadyInDictionaryError
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.analytics.schemas import WordAnalyticsResponse
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.common.schemas.response_wrappers import (
    PaginatedResponse,
    SuccessResponse,
)
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.vocabulary.schemas import (
    DictionaryAddRequest,
    DictionaryStatsResponse,
    LearningStatusUpdateRequest,
    UserWordCustomizeRequest,
    UserWordResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])


@router.post("", response_model=UserWordResponse, status_code=status.HTTP_201_CREATED)
def add_to_dictionary(
    request: DictionaryAddRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> UserWordResponse:
    """
    Add a catalogue definition to your dictionary.

    A previously removed entry is restored with its progress.

    Raises:
        HTTPException: 409 if the definition is already in the dictionary
    """
    try:
        user_word = use_case.add_to_dictionary(
            current_user.id.value, request.definition_id, current_user.base_language_code
        )
        return UserWordResponse.from_domain(user_word)
    except WordAlreadyInDictionaryError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to add definition {request.definition_id} for user "
            f"{current_user.id.value}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=PaginatedResponse[UserWordResponse])
def list_dictionary(
    current_user: Annotated[User, Depends(get_current_user)],
    learning_status: Annotated[list[LearningStatus] | None, Query()] = None,
    search: str | None = Query(None, description="Substring of the word or definition"),
    part_of_speech: PartOfSpeech | None = Query(None),
    is_favorite: bool | None = Query(None),
    is_modified: bool | None = Query(None),
    needs_review: bool = Query(False),
    sort_by: UserWordSortField = Query(UserWordSortField.CREATED_AT),
    sort_order: SortOrder = Query(SortOrder.DESC),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> PaginatedResponse[UserWordResponse]:
    """List dictionary entries with filters, sorting and pagination."""
    try:
        filters = UserWordFilters(
            learning_statuses=learning_status or [],
            search=search,
            part_of_speech=part_of_speech,
            is_favorite=is_favorite,
            is_modified=is_modified,
            needs_review=needs_review,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        result = use_case.list_words(current_user.id.value, filters, page, page_size)
        return PaginatedResponse[UserWordResponse].from_result(
            result, [UserWordResponse.from_domain(user_word) for user_word in result.items]
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to list dictionary for user {current_user.id.value}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/stats", response_model=DictionaryStatsResponse)
def get_dictionary_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> DictionaryStatsResponse:
    """Totals, favorites, due reviews and the per-status breakdown of your dictionary."""
    return DictionaryStatsResponse.from_stats(use_case.get_stats(current_user.id.value))


@router.get("/{user_word_id}", response_model=UserWordResponse)
def get_dictionary_entry(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> UserWordResponse:
    return UserWordResponse.from_domain(use_case.get_word(current_user.id.value, user_word_id))


@router.patch("/{user_word_id}", response_model=UserWordResponse)
def customize_dictionary_entry(
    user_word_id: int,
    request: UserWordCustomizeRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> UserWordResponse:
    try:
        user_word = use_case.customize_word(
            current_user.id.value,
            user_word_id,
            custom_definition=request.custom_definition,
            custom_translation=request.custom_translation,
            custom_phonetic=request.custom_phonetic,
            custom_notes=request.custom_notes,
            custom_tags=request.custom_tags,
            custom_difficulty_level=request.custom_difficulty_level,
        )
        return UserWordResponse.from_domain(user_word)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to customize entry {user_word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/{user_word_id}/favorite", response_model=UserWordResponse)
def toggle_favorite(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> UserWordResponse:
    return UserWordResponse.from_domain(
        use_case.toggle_favorite(current_user.id.value, user_word_id)
    )


@router.put("/{user_word_id}/status", response_model=UserWordResponse)
def update_learning_status(
    user_word_id: int,
    request: LearningStatusUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> UserWordResponse:
    """
    Set the learning status by hand, optionally with progress, mastery and
    the next review date. Counts as one review.
    """
    try:
        user_word = use_case.update_learning_status(
            current_user.id.value,
            user_word_id,
            request.learning_status,
            progress=request.progress,
            mastery_score=request.mastery_score,
            next_review_due=request.next_review_due,
        )
        return UserWordResponse.from_domain(user_word)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update status of entry {user_word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/{user_word_id}/skip", response_model=UserWordResponse)
def skip_dictionary_entry(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> UserWordResponse:
    """Record that the word was skipped during practice."""
    return UserWordResponse.from_domain(use_case.skip_word(current_user.id.value, user_word_id))


@router.delete("/{user_word_id}", response_model=SuccessResponse)
def remove_dictionary_entry(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> SuccessResponse:
    """Soft delete an entry. Progress is kept and the entry can be restored."""
    use_case.remove_word(current_user.id.value, user_word_id)
    return SuccessResponse(success=True, message="Word removed from dictionary")


@router.post("/{user_word_id}/restore", response_model=UserWordResponse)
def restore_dictionary_entry(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserDictionaryUseCase = Depends(
        inject_use_case(container.user_dictionary_use_case)
    ),
) -> UserWordResponse:
    return UserWordResponse.from_domain(
        use_case.restore_word(current_user.id.value, user_word_id)
    )


@router.get("/{user_word_id}/analytics", response_model=WordAnalyticsResponse)
def get_word_analytics(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordAnalyticsUseCase = Depends(inject_use_case(container.word_analytics_use_case)),
) -> WordAnalyticsResponse:
    """
    Get the analytics report for a dictionary entry.

    Covers accuracy and timing, progression and SRS effectiveness, error
    patterns, predictions, insights and a learning timeline.
    """
    try:
        analytics = use_case.get_word_analytics(current_user.id.value, user_word_id)
        return WordAnalyticsResponse.from_domain(analytics)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to build analytics for entry {user_word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
