"""Pydantic schemas for word lists and categories."""

from datetime import datetime

from pydantic import BaseModel, Field

from lexiflow.domain.dictionary.entities.word_list import Category, WordList
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: str | None = None


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str | None = None

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id.value, name=category.name, description=category.description)


class WordListCreateRequest(BaseModel):
    """Schema for creating a community word list."""

    name: str = Field(..., min_length=1, max_length=255, description="List name")
    base_language_code: LanguageCode
    target_language_code: LanguageCode
    description: str | None = None
    category_id: int | None = None
    is_public: bool = True
    tags: list[str] = Field(default_factory=list)
    cover_image_url: str | None = None
    difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER
    definition_ids: list[int] = Field(
        default_factory=list, description="Initial definitions in display order"
    )


class WordListUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    difficulty_level: DifficultyLevel | None = None
    is_public: bool | None = None
    tags: list[str] | None = None
    cover_image_url: str | None = None
    category_id: int | None = None


class WordListDefinitionRequest(BaseModel):
    definition_id: int = Field(..., description="Definition to add to the list")


class WordListResponse(BaseModel):
    """Schema for a word list."""

    id: int
    name: str
    description: str | None = None
    base_language_code: LanguageCode
    target_language_code: LanguageCode
    category_id: int | None = None
    owner_id: int | None = None
    is_official: bool
    is_public: bool
    tags: list[str]
    cover_image_url: str | None = None
    difficulty_level: DifficultyLevel
    word_count: int
    definition_ids: list[int]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, word_list: WordList) -> "WordListResponse":
        return cls(
            id=word_list.id.value,
            name=word_list.name,
            description=word_list.description,
            base_language_code=word_list.base_language_code,
            target_language_code=word_list.target_language_code,
            category_id=word_list.category_id.value if word_list.category_id else None,
            owner_id=word_list.owner_id.value if word_list.owner_id else None,
            is_official=word_list.is_official,
            is_public=word_list.is_public,
            tags=word_list.tags,
            cover_image_url=word_list.cover_image_url,
            difficulty_level=word_list.difficulty_level,
            word_count=word_list.word_count,
            definition_ids=[definition_id.value for definition_id in word_list.definition_ids],
            created_at=word_list.created_at,
            updated_at=word_list.updated_at,
        )
