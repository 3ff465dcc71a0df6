import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiflow.application.vocabulary.dtos import SortOrder, UserListFilters, UserListSortField
from lexiflow.application.vocabulary.use_cases.user_list_use_case import UserListUseCase
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.vocabulary.exceptions import ListAlreadyInCollectionError
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.common.schemas.response_wrappers import SuccessResponse
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.vocabulary.schemas import (
    CustomListCreateRequest,
    UserListAddRequest,
    UserListResponse,
    UserListUpdateRequest,
    UserListWordRequest,
    UserWordResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user-lists", tags=["user-lists"])


@router.get("", response_model=list[UserListResponse])
def list_collection(
    current_user: Annotated[User, Depends(get_current_user)],
    search: str | None = Query(None),
    difficulty: DifficultyLevel | None = Query(None),
    target_language_code: LanguageCode | None = Query(None),
    custom_only: bool = Query(False),
    sort_by: UserListSortField = Query(UserListSortField.CREATED_AT),
    sort_order: SortOrder = Query(SortOrder.DESC),
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> list[UserListResponse]:
    """List the lists in your collection."""
    filters = UserListFilters(
        search=search,
        difficulty=difficulty,
        target_language_code=target_language_code,
        custom_only=custom_only,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return [
        UserListResponse.from_details(details)
        for details in use_case.list_collection(current_user.id.value, filters)
    ]


@router.post("", response_model=UserListResponse, status_code=status.HTTP_201_CREATED)
def add_list_to_collection(
    request: UserListAddRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> UserListResponse:
    """
    Add a public word list to your collection.

    Its definitions are added to your dictionary; existing entries are reused.
    """
    try:
        details = use_case.add_list_to_collection(
            current_user.id.value, request.list_id, current_user.base_language_code
        )
        return UserListResponse.from_details(details)
    except ListAlreadyInCollectionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add list {request.list_id} to collection: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/custom", response_model=UserListResponse, status_code=status.HTTP_201_CREATED)
def create_custom_list(
    request: CustomListCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> UserListResponse:
    try:
        details = use_case.create_custom_list(
            current_user.id.value,
            name=request.name,
            base_language_code=current_user.base_language_code,
            target_language_code=request.target_language_code,
            description=request.description,
            difficulty=request.difficulty,
            user_word_ids=request.user_word_ids,
        )
        return UserListResponse.from_details(details)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create custom list: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{user_list_id}", response_model=UserListResponse)
def get_user_list(
    user_list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> UserListResponse:
    return UserListResponse.from_details(use_case.get_user_list(current_user.id.value, user_list_id))


@router.patch("/{user_list_id}", response_model=UserListResponse)
def update_user_list(
    user_list_id: int,
    request: UserListUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> UserListResponse:
    details = use_case.update_user_list(
        current_user.id.value,
        user_list_id,
        custom_name=request.custom_name,
        custom_description=request.custom_description,
        custom_cover_image_url=request.custom_cover_image_url,
        custom_difficulty=request.custom_difficulty,
    )
    return UserListResponse.from_details(details)


@router.delete("/{user_list_id}", response_model=SuccessResponse)
def remove_from_collection(
    user_list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> SuccessResponse:
    """Remove a list from your collection. Dictionary entries are kept."""
    use_case.remove_from_collection(current_user.id.value, user_list_id)
    return SuccessResponse(success=True, message="List removed from collection")


@router.get("/{user_list_id}/words", response_model=list[UserWordResponse])
def get_user_list_words(
    user_list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> list[UserWordResponse]:
    return [
        UserWordResponse.from_domain(user_word)
        for user_word in use_case.get_words(current_user.id.value, user_list_id)
    ]


@router.post("/{user_list_id}/words", response_model=UserListResponse)
def add_word_to_user_list(
    user_list_id: int,
    request: UserListWordRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> UserListResponse:
    details = use_case.add_word(current_user.id.value, user_list_id, request.user_word_id)
    return UserListResponse.from_details(details)


@router.delete("/{user_list_id}/words/{user_word_id}", response_model=UserListResponse)
def remove_word_from_user_list(
    user_list_id: int,
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> UserListResponse:
    details = use_case.remove_word(current_user.id.value, user_list_id, user_word_id)
    return UserListResponse.from_details(details)


@router.post("/{user_list_id}/progress", response_model=UserListResponse)
def refresh_user_list_progress(
    user_list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UserListUseCase = Depends(inject_use_case(container.user_list_use_case)),
) -> UserListResponse:
    """Recompute the learned share of the list."""
    use_case.refresh_progress(current_user.id.value, user_list_id)
    return UserListResponse.from_details(use_case.get_user_list(current_user.id.value, user_list_id))
