"""Filter and view types for the user dictionary."""

from dataclasses import dataclass, field
from enum import Enum

from lexiflow.domain.dictionary.entities.word_list import WordList
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode, PartOfSpeech
from lexiflow.domain.vocabulary.entities.user_list import UserList
from lexiflow.domain.vocabulary.value_objects import LearningStatus


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class UserWordSortField(str, Enum):
    CREATED_AT = "created_at"
    WORD = "word"
    MASTERY_SCORE = "mastery_score"
    LAST_REVIEWED_AT = "last_reviewed_at"
    NEXT_SRS_REVIEW = "next_srs_review"


class UserListSortField(str, Enum):
    NAME = "name"
    CREATED_AT = "created_at"
    PROGRESS = "progress"
    WORD_COUNT = "word_count"


@dataclass(frozen=True)
class UserWordFilters:
    """
    Filters for listing dictionary entries.

    Attributes:
        learning_statuses: Keep entries in any of these statuses (all when empty)
        search: Case-insensitive substring of the word, definition or custom definition
        needs_review: Only entries whose review is due or that are marked needsReview
    """

    learning_statuses: list[LearningStatus] = field(default_factory=list)
    search: str | None = None
    part_of_speech: PartOfSpeech | None = None
    is_favorite: bool | None = None
    is_modified: bool | None = None
    needs_review: bool = False
    sort_by: UserWordSortField = UserWordSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class UserListFilters:
    search: str | None = None
    difficulty: DifficultyLevel | None = None
    target_language_code: LanguageCode | None = None
    custom_only: bool = False
    sort_by: UserListSortField = UserListSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


@dataclass
class UserListDetails:
    """A collection entry joined with the public list it was adopted from, if any."""

    user_list: UserList
    word_list: WordList | None = None

    @property
    def name(self) -> str:
        if self.user_list.custom_name:
            return self.user_list.custom_name
        return self.word_list.name if self.word_list else ""

    @property
    def description(self) -> str | None:
        if self.user_list.custom_description is not None:
            return self.user_list.custom_description
        return self.word_list.description if self.word_list else None

    @property
    def cover_image_url(self) -> str | None:
        if self.user_list.custom_cover_image_url:
            return self.user_list.custom_cover_image_url
        return self.word_list.cover_image_url if self.word_list else None

    @property
    def difficulty(self) -> DifficultyLevel | None:
        if self.user_list.custom_difficulty:
            return self.user_list.custom_difficulty
        return self.word_list.difficulty_level if self.word_list else None


@dataclass
class DictionaryStats:
    """Counts over the user's active dictionary entries."""

    total_words: int
    favorite_words: int
    words_needing_review: int
    average_mastery_score: float
    status_breakdown: dict[LearningStatus, int] = field(default_factory=dict)
