"""Input and filter types for dictionary use cases."""

from dataclasses import dataclass, field

from lexiflow.domain.dictionary.value_objects import (
    DifficultyLevel,
    Gender,
    LanguageCode,
    PartOfSpeech,
    SourceType,
)


@dataclass
class NewDefinition:
    text: str
    translation: str | None = None
    image_url: str | None = None
    audio_url: str | None = None
    usage_note: str | None = None
    examples: list[str] = field(default_factory=list)
    source: SourceType = SourceType.USER


@dataclass
class NewWordDetail:
    part_of_speech: PartOfSpeech
    definitions: list[NewDefinition] = field(default_factory=list)
    variant: str | None = None
    gender: Gender | None = None
    phonetic: str | None = None
    forms: str | None = None
    frequency: int | None = None
    source: SourceType = SourceType.USER


@dataclass(frozen=True)
class WordListFilters:
    """
    Filters for browsing word lists.

    Attributes:
        search: Case-insensitive substring of the list name
        public_only: Hide private lists, including the viewer's own
        viewer_id: When set, the viewer's private lists are included
    """

    search: str | None = None
    difficulty_level: DifficultyLevel | None = None
    base_language_code: LanguageCode | None = None
    target_language_code: LanguageCode | None = None
    category_id: int | None = None
    public_only: bool = False
    viewer_id: int | None = None
