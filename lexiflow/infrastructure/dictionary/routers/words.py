import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiflow.application.dictionary.use_cases.word_use_case import WordUseCase
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.dictionary.exceptions import WordAlreadyExistsError
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.common.schemas.response_wrappers import (
    PaginatedResponse,
    SuccessResponse,
)
from lexiflow.infrastructure.dictionary.schemas import (
    DefinitionLookupResponse,
    DefinitionResponse,
    WordCreateRequest,
    WordResponse,
    WordSummary,
)
from lexiflow.infrastructure.identity.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


@router.post("", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
def create_word(
    request: WordCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> WordResponse:
    """
    Add a word to the shared catalogue.

    Details and definitions are created together with the word.

    Raises:
        HTTPException: 409 if the word already exists for the language
    """
    try:
        word = use_case.create_word(
            text=request.text,
            language_code=request.language_code,
            details=[detail.to_dto() for detail in request.details],
            phonetic=request.phonetic,
            frequency=request.frequency,
            etymology=request.etymology,
        )
        return WordResponse.from_domain(word)
    except WordAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create word '{request.text}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=PaginatedResponse[WordSummary])
def search_words(
    current_user: Annotated[User, Depends(get_current_user)],
    q: str | None = Query(None, description="Text prefix to search for"),
    language_code: LanguageCode | None = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> PaginatedResponse[WordSummary]:
    """Search the catalogue by text prefix, optionally within one language."""
    try:
        result = use_case.search_words(q, language_code, page, page_size)
        return PaginatedResponse[WordSummary].from_result(
            result, [WordSummary.from_domain(word) for word in result.items]
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to search words: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/definitions/{definition_id}", response_model=DefinitionLookupResponse)
def get_definition(
    definition_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> DefinitionLookupResponse:
    """Look up a single definition with the word it belongs to."""
    word, definition = use_case.get_definition(definition_id)
    return DefinitionLookupResponse(
        word=WordSummary.from_domain(word), definition=DefinitionResponse.from_domain(definition)
    )


@router.get("/{word_id}", response_model=WordResponse)
def get_word(
    word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> WordResponse:
    try:
        return WordResponse.from_domain(use_case.get_word(word_id))
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{word_id}", response_model=SuccessResponse)
def delete_word(
    word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> SuccessResponse:
    """Delete a word with all of its details and definitions."""
    try:
        use_case.delete_word(word_id)
        return SuccessResponse(success=True, message="Word deleted successfully")
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
