import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from lexiflow.application.identity.use_cases.learner_profile_use_case import (
    LearnerProfileUseCase,
)
from lexiflow.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from lexiflow.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    PasswordVerificationError,
    RegistrationDisabledError,
)
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.common.schemas.response_wrappers import SuccessResponse
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.identity.routers.auth import (
    clear_refresh_cookie,
    limiter,
    set_refresh_cookie,
)
from lexiflow.infrastructure.identity.schemas import (
    AccountDeleteRequest,
    LearningSettingsResponse,
    LearningSettingsUpdateRequest,
    LoginResponse,
    StudyPreferencesResponse,
    TypingPreferencesResponse,
    TypingPreferencesUpdateRequest,
    UserDetailsResponse,
    UserRegisterRequest,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("/register", response_model=LoginResponse)
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request,
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> LoginResponse:
    """
    Create an account and sign in to it.

    Raises:
        HTTPException: 403 if registration is switched off, 400 if the email is taken
    """
    try:
        user, token_pair = use_case.register_user(
            email=register_data.email,
            password=register_data.password,
            name=register_data.name,
            base_language_code=register_data.base_language_code,
            target_language_code=register_data.target_language_code,
        )
    except RegistrationDisabledError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User registration is currently disabled",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("register user", e) from e
    set_refresh_cookie(response, token_pair.refresh_token)
    return LoginResponse.build(user, token_pair)


@router.get("/me")
async def get_me(current_user: Annotated[User, Depends(get_current_user)]) -> UserDetailsResponse:
    return UserDetailsResponse.from_domain(current_user)


@router.post("/me")
async def update_me(
    current_user: Annotated[User, Depends(get_current_user)],
    update_data: UserUpdateRequest,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserDetailsResponse:
    """
    Update your profile.

    Send only the fields to change. A password change needs both
    ``current_password`` and ``new_password``.
    """
    try:
        user = use_case.update_user(
            user_id=current_user.id.value,
            email=update_data.email,
            name=update_data.name,
            base_language_code=update_data.base_language_code,
            target_language_code=update_data.target_language_code,
            current_password=update_data.current_password,
            new_password=update_data.new_password,
        )
        return UserDetailsResponse.from_domain(user)
    except PasswordVerificationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update user {current_user.id.value}", e) from e


@router.get("/me/settings", response_model=LearningSettingsResponse)
def get_learning_settings(
    current_user: Annotated[User, Depends(get_current_user)],
) -> LearningSettingsResponse:
    """Get your learning settings. Settings never changed come back with their defaults."""
    return LearningSettingsResponse.from_domain(current_user.learning_settings)


@router.put("/me/settings", response_model=LearningSettingsResponse)
def update_learning_settings(
    request: LearningSettingsUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearnerProfileUseCase = Depends(inject_use_case(container.learner_profile_use_case)),
) -> LearningSettingsResponse:
    """Change some learning settings; omitted fields keep their value."""
    try:
        settings = use_case.update_learning_settings(
            current_user.id.value, **request.model_dump(exclude_unset=True)
        )
        return LearningSettingsResponse.from_domain(settings)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update settings of user {current_user.id.value}", e) from e


@router.get("/me/preferences", response_model=StudyPreferencesResponse)
def get_study_preferences(
    current_user: Annotated[User, Depends(get_current_user)],
) -> StudyPreferencesResponse:
    """Get the preferences of every practice type."""
    return StudyPreferencesResponse(
        typing_practice=TypingPreferencesResponse.from_domain(current_user.typing_preferences)
    )


@router.get("/me/preferences/typing", response_model=TypingPreferencesResponse)
def get_typing_preferences(
    current_user: Annotated[User, Depends(get_current_user)],
) -> TypingPreferencesResponse:
    return TypingPreferencesResponse.from_domain(current_user.typing_preferences)


@router.put("/me/preferences/typing", response_model=TypingPreferencesResponse)
def update_typing_preferences(
    request: TypingPreferencesUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearnerProfileUseCase = Depends(inject_use_case(container.learner_profile_use_case)),
) -> TypingPreferencesResponse:
    """Change some typing practice preferences; omitted fields keep their value."""
    try:
        preferences = use_case.update_typing_preferences(
            current_user.id.value, **request.model_dump(exclude_unset=True)
        )
        return TypingPreferencesResponse.from_domain(preferences)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update typing preferences of user {current_user.id.value}", e) from e


@router.post("/me/preferences/typing/reset", response_model=TypingPreferencesResponse)
def reset_typing_preferences(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearnerProfileUseCase = Depends(inject_use_case(container.learner_profile_use_case)),
) -> TypingPreferencesResponse:
    """Put every typing practice preference back to its default."""
    return TypingPreferencesResponse.from_domain(
        use_case.reset_typing_preferences(current_user.id.value)
    )


@router.delete("/me", response_model=SuccessResponse)
def delete_account(
    request: AccountDeleteRequest,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearnerProfileUseCase = Depends(inject_use_case(container.learner_profile_use_case)),
) -> SuccessResponse:
    """
    Delete your account. Send ``{"confirmation": "DELETE"}`` to confirm.

    The account is deactivated, not erased: sign-in and existing tokens stop working.

    Raises:
        HTTPException: 400 if the confirmation text does not match
    """
    try:
        use_case.delete_account(current_user.id.value, request.confirmation)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete account of user {current_user.id.value}", e) from e
    clear_refresh_cookie(response)
    return SuccessResponse(success=True, message="Account deleted")
