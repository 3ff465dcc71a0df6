import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from lexiflow.application.dictionary.use_cases.category_use_case import CategoryUseCase
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.identity.entities.user import User
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.dictionary.schemas import CategoryCreateRequest, CategoryResponse
from lexiflow.infrastructure.identity.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> list[CategoryResponse]:
    return [CategoryResponse.from_domain(category) for category in use_case.list_categories()]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    request: CategoryCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> CategoryResponse:
    try:
        category = use_case.create_category(request.name, request.description)
        return CategoryResponse.from_domain(category)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create category '{request.name}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
