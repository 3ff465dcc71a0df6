"""Pydantic schemas for dictionary entries."""

from datetime import datetime

from pydantic import BaseModel, Field

from lexiflow.application.vocabulary.dtos import DictionaryStats
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode, PartOfSpeech
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus


class DictionaryAddRequest(BaseModel):
    definition_id: int = Field(..., description="Catalogue definition to add")


class UserWordCustomizeRequest(BaseModel):
    """
    Schema for customizing a dictionary entry.

    Omitted fields are left alone; an empty string clears a custom value.
    """

    custom_definition: str | None = None
    custom_translation: str | None = None
    custom_phonetic: str | None = None
    custom_notes: str | None = None
    custom_tags: list[str] | None = None
    custom_difficulty_level: DifficultyLevel | None = None


class LearningStatusUpdateRequest(BaseModel):
    learning_status: LearningStatus
    progress: float | None = Field(None, ge=0, le=100)
    mastery_score: float | None = Field(None, ge=0, le=100)
    next_review_due: datetime | None = None


class UserWordResponse(BaseModel):
    """Schema for a dictionary entry with its effective content and progress."""

    id: int
    definition_id: int
    word_id: int | None = None
    word: str
    definition: str
    translation: str | None = None
    phonetic: str | None = None
    part_of_speech: PartOfSpeech | None = None
    image_url: str | None = None
    audio_url: str | None = None
    base_language_code: LanguageCode
    target_language_code: LanguageCode

    custom_definition: str | None = None
    custom_translation: str | None = None
    custom_phonetic: str | None = None
    custom_notes: str | None = None
    custom_tags: list[str] = Field(default_factory=list)
    custom_difficulty_level: DifficultyLevel | None = None
    is_modified: bool
    is_favorite: bool

    learning_status: LearningStatus
    progress: float
    review_count: int
    amount_of_mistakes: int
    correct_streak: int
    skip_count: int
    mastery_score: float
    last_reviewed_at: datetime | None = None
    learned_at: datetime | None = None
    next_review_due: datetime | None = None

    srs_level: int
    srs_interval: int
    last_srs_success: bool | None = None
    next_srs_review: datetime | None = None

    created_at: datetime | None = None
    deleted_at: datetime | None = None

    @classmethod
    def from_domain(cls, user_word: UserWord) -> "UserWordResponse":
        content = user_word.content
        return cls(
            id=user_word.id.value,
            definition_id=user_word.definition_id.value,
            word_id=content.word_id.value if content else None,
            word=user_word.word_text,
            definition=user_word.definition_text,
            translation=user_word.translation,
            phonetic=user_word.phonetic,
            part_of_speech=content.part_of_speech if content else None,
            image_url=content.image_url if content else None,
            audio_url=content.audio_url if content else None,
            base_language_code=user_word.base_language_code,
            target_language_code=user_word.target_language_code,
            custom_definition=user_word.custom_definition,
            custom_translation=user_word.custom_translation,
            custom_phonetic=user_word.custom_phonetic,
            custom_notes=user_word.custom_notes,
            custom_tags=user_word.custom_tags,
            custom_difficulty_level=user_word.custom_difficulty_level,
            is_modified=user_word.is_modified,
            is_favorite=user_word.is_favorite,
            learning_status=user_word.learning_status,
            progress=user_word.progress,
            review_count=user_word.review_count,
            amount_of_mistakes=user_word.amount_of_mistakes,
            correct_streak=user_word.correct_streak,
            skip_count=user_word.skip_count,
            mastery_score=user_word.mastery_score,
            last_reviewed_at=user_word.last_reviewed_at,
            learned_at=user_word.learned_at,
            next_review_due=user_word.next_review_due,
            srs_level=user_word.srs_level,
            srs_interval=user_word.srs_interval,
            last_srs_success=user_word.last_srs_success,
            next_srs_review=user_word.next_srs_review,
            created_at=user_word.created_at,
            deleted_at=user_word.deleted_at,
        )


class DictionaryStatsResponse(BaseModel):
    total_words: int
    favorite_words: int
    words_needing_review: int
    average_mastery_score: float
    status_breakdown: dict[LearningStatus, int]

    @classmethod
    def from_stats(cls, stats: DictionaryStats) -> "DictionaryStatsResponse":
        return cls(
            total_words=stats.total_words,
            favorite_words=stats.favorite_words,
            words_needing_review=stats.words_needing_review,
            average_mastery_score=stats.average_mastery_score,
            status_breakdown=stats.status_breakdown,
        )
