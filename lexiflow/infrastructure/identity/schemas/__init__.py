"""Request and response models of accounts, sign-in and learner settings."""

from lexiflow.infrastructure.identity.schemas.learner_profile_schemas import (
    LearningSettingsResponse,
    LearningSettingsUpdateRequest,
    StudyPreferencesResponse,
    TypingPreferencesResponse,
    TypingPreferencesUpdateRequest,
)
from lexiflow.infrastructure.identity.schemas.user_schemas import (
    AccountDeleteRequest,
    LoginResponse,
    UserDetailsResponse,
    UserRegisterRequest,
    UserUpdateRequest,
)

__all__ = [
    "AccountDeleteRequest",
    "LearningSettingsResponse",
    "LearningSettingsUpdateRequest",
    "LoginResponse",
    "StudyPreferencesResponse",
    "TypingPreferencesResponse",
    "TypingPreferencesUpdateRequest",
    "UserDetailsResponse",
    "UserRegisterRequest",
    "UserUpdateRequest",
]
