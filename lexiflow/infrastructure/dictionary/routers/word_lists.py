import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiflow.application.dictionary.dtos import WordListFilters
from lexiflow.application.dictionary.use_cases.word_list_use_case import WordListUseCase
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.common.schemas.response_wrappers import (
    PaginatedResponse,
    SuccessResponse,
)
from lexiflow.infrastructure.dictionary.schemas import (
    WordListCreateRequest,
    WordListDefinitionRequest,
    WordListResponse,
    WordListUpdateRequest,
)
from lexiflow.infrastructure.identity.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/word-lists", tags=["word-lists"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("", response_model=PaginatedResponse[WordListResponse])
def list_word_lists(
    current_user: Annotated[User, Depends(get_current_user)],
    search: str | None = Query(None, description="Substring of the list name"),
    difficulty_level: DifficultyLevel | None = Query(None),
    base_language_code: LanguageCode | None = Query(None),
    target_language_code: LanguageCode | None = Query(None),
    category_id: int | None = Query(None),
    public_only: bool = Query(False, description="Hide private lists, including your own"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> PaginatedResponse[WordListResponse]:
    """
    Browse official and community word lists.

    Your own private lists are included unless ``public_only`` is set.
    """
    try:
        filters = WordListFilters(
            search=search,
            difficulty_level=difficulty_level,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            category_id=category_id,
            public_only=public_only,
            viewer_id=current_user.id.value,
        )
        result = use_case.list_lists(filters, page, page_size)
        return PaginatedResponse[WordListResponse].from_result(
            result, [WordListResponse.from_domain(word_list) for word_list in result.items]
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list word lists", e) from e


@router.post("", response_model=WordListResponse, status_code=status.HTTP_201_CREATED)
def create_word_list(
    request: WordListCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListResponse:
    """Create a community list owned by the current user."""
    try:
        word_list = use_case.create_list(
            user_id=current_user.id.value,
            name=request.name,
            base_language_code=request.base_language_code,
            target_language_code=request.target_language_code,
            description=request.description,
            category_id=request.category_id,
            is_public=request.is_public,
            tags=request.tags,
            cover_image_url=request.cover_image_url,
            difficulty_level=request.difficulty_level,
            definition_ids=request.definition_ids,
        )
        return WordListResponse.from_domain(word_list)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("create word list", e) from e


@router.get("/{list_id}", response_model=WordListResponse)
def get_word_list(
    list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListResponse:
    try:
        return WordListResponse.from_domain(use_case.get_list(list_id, current_user.id.value))
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get word list {list_id}", e) from e


@router.patch("/{list_id}", response_model=WordListResponse)
def update_word_list(
    list_id: int,
    request: WordListUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListResponse:
    try:
        word_list = use_case.update_list(
            list_id,
            current_user.id.value,
            name=request.name,
            description=request.description,
            difficulty_level=request.difficulty_level,
            is_public=request.is_public,
            tags=request.tags,
            cover_image_url=request.cover_image_url,
            category_id=request.category_id,
        )
        return WordListResponse.from_domain(word_list)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update word list {list_id}", e) from e


@router.delete("/{list_id}", response_model=SuccessResponse)
def delete_word_list(
    list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> SuccessResponse:
    """Soft delete a list. Deleted lists can be restored."""
    try:
        use_case.delete_list(list_id, current_user.id.value)
        return SuccessResponse(success=True, message="Word list deleted successfully")
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete word list {list_id}", e) from e


@router.post("/{list_id}/restore", response_model=WordListResponse)
def restore_word_list(
    list_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListResponse:
    try:
        return WordListResponse.from_domain(use_case.restore_list(list_id, current_user.id.value))
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"restore word list {list_id}", e) from e


@router.post("/{list_id}/definitions", response_model=WordListResponse)
def add_definition_to_list(
    list_id: int,
    request: WordListDefinitionRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListResponse:
    try:
        word_list = use_case.add_definition(list_id, current_user.id.value, request.definition_id)
        return WordListResponse.from_domain(word_list)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"add definition to word list {list_id}", e) from e


@router.delete("/{list_id}/definitions/{definition_id}", response_model=WordListResponse)
def remove_definition_from_list(
    list_id: int,
    definition_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListResponse:
    try:
        word_list = use_case.remove_definition(list_id, current_user.id.value, definition_id)
        return WordListResponse.from_domain(word_list)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"remove definition from word list {list_id}", e) from e
