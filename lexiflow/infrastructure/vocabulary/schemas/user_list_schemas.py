"""Pydantic schemas for the user's list collection."""

from datetime import datetime

from pydantic import BaseModel, Field

from lexiflow.application.vocabulary.dtos import UserListDetails
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode


class UserListAddRequest(BaseModel):
    list_id: int = Field(..., description="Public word list to add to the collection")


class CustomListCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    target_language_code: LanguageCode
    description: str | None = None
    difficulty: DifficultyLevel | None = None
    user_word_ids: list[int] = Field(default_factory=list, description="Dictionary entries")


class UserListUpdateRequest(BaseModel):
    custom_name: str | None = Field(None, min_length=1, max_length=255)
    custom_description: str | None = None
    custom_cover_image_url: str | None = None
    custom_difficulty: DifficultyLevel | None = None


class UserListWordRequest(BaseModel):
    user_word_id: int


class UserListResponse(BaseModel):
    """Schema for a collection entry with the effective (custom or inherited) details."""

    id: int
    list_id: int | None = None
    is_custom: bool
    is_modified: bool
    name: str
    description: str | None = None
    cover_image_url: str | None = None
    difficulty: DifficultyLevel | None = None
    base_language_code: LanguageCode
    target_language_code: LanguageCode
    word_count: int
    user_word_ids: list[int]
    progress: float
    created_at: datetime | None = None

    @classmethod
    def from_details(cls, details: UserListDetails) -> "UserListResponse":
        user_list = details.user_list
        return cls(
            id=user_list.id.value,
            list_id=user_list.list_id.value if user_list.list_id else None,
            is_custom=user_list.is_custom,
            is_modified=user_list.is_modified,
            name=details.name,
            description=details.description,
            cover_image_url=details.cover_image_url,
            difficulty=details.difficulty,
            base_language_code=user_list.base_language_code,
            target_language_code=user_list.target_language_code,
            word_count=user_list.word_count,
            user_word_ids=[user_word_id.value for user_word_id in user_list.user_word_ids],
            progress=user_list.progress,
            created_at=user_list.created_at,
        )
