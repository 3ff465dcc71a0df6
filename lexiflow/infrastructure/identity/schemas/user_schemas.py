from datetime import datetime

from pydantic import BaseModel, Field

from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.infrastructure.identity.services.token_service import TokenWithRefresh


class UserDetailsResponse(BaseModel):
    """Schema for returning user details."""

    id: int = Field(..., description="User id")
    email: str = Field(..., description="User email")
    name: str | None = Field(None, description="Display name")
    base_language_code: LanguageCode = Field(..., description="Language translations are shown in")
    target_language_code: LanguageCode | None = Field(None, description="Language being learned")
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserDetailsResponse":
        return cls(
            id=user.id.value,
            email=user.email,
            name=user.name,
            base_language_code=user.base_language_code,
            target_language_code=user.target_language_code,
            created_at=user.created_at,
        )


class LoginResponse(TokenWithRefresh):
    """Token pair plus the signed-in learner, returned by login and registration."""

    user: UserDetailsResponse

    @classmethod
    def build(cls, user: User, token_pair: TokenWithRefresh) -> "LoginResponse":
        return cls(**token_pair.model_dump(), user=UserDetailsResponse.from_domain(user))


class UserUpdateRequest(BaseModel):
    """Schema for updating user profile."""

    email: str | None = Field(None, min_length=1, max_length=100, description="New email")
    name: str | None = Field(None, min_length=1, max_length=100, description="New display name")
    base_language_code: LanguageCode | None = Field(None, description="New base language")
    target_language_code: LanguageCode | None = Field(None, description="New language to learn")
    current_password: str | None = Field(
        None, min_length=1, description="Current password (required when changing password)"
    )
    new_password: str | None = Field(
        None, min_length=8, description="New password (min 8 characters)"
    )


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    email: str = Field(..., min_length=1, max_length=100, description="Email for the new account")
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    name: str | None = Field(None, min_length=1, max_length=100, description="Display name")
    base_language_code: LanguageCode = Field(
        LanguageCode.EN, description="Language translations are shown in"
    )
    target_language_code: LanguageCode | None = Field(None, description="Language to learn")


class AccountDeleteRequest(BaseModel):
    confirmation: str = Field(..., description='Must be exactly "DELETE"')
