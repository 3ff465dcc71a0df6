"""
Word aggregate: a headword with its part-of-speech senses and definitions.
"""

from dataclasses import dataclass, field
from datetime import datetime

from lexiflow.domain.common.aggregate_root import AggregateRoot
from lexiflow.domain.common.entity import Entity
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import DefinitionId, WordDetailId, WordId
from lexiflow.domain.dictionary.value_objects import (
    Gender,
    LanguageCode,
    PartOfSpeech,
    SourceType,
)

MAX_WORD_LENGTH = 255


@dataclass
class Definition(Entity[DefinitionId]):
    """A single meaning of a word detail, optionally illustrated."""

    id: DefinitionId
    text: str
    language_code: LanguageCode
    source: SourceType = SourceType.USER
    translation: str | None = None
    image_url: str | None = None
    audio_url: str | None = None
    usage_note: str | None = None
    examples: list[str] = field(default_factory=list)
    word_detail_id: WordDetailId | None = None

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValidationError("Definition text cannot be empty", field="text")

    @classmethod
    def create(
        cls,
        text: str,
        language_code: LanguageCode,
        source: SourceType = SourceType.USER,
        translation: str | None = None,
        image_url: str | None = None,
        audio_url: str | None = None,
        usage_note: str | None = None,
        examples: list[str] | None = None,
    ) -> "Definition":
        return cls(
            id=DefinitionId.generate(),
            text=text.strip(),
            language_code=language_code,
            source=source,
            translation=translation.strip() if translation else None,
            image_url=image_url,
            audio_url=audio_url,
            usage_note=usage_note,
            examples=[example.strip() for example in examples or [] if example.strip()],
        )


@dataclass
class WordDetail(Entity[WordDetailId]):
    """A part-of-speech specific sense of a word."""

    id: WordDetailId
    part_of_speech: PartOfSpeech
    variant: str | None = None
    gender: Gender | None = None
    phonetic: str | None = None
    forms: str | None = None
    frequency: int | None = None
    source: SourceType = SourceType.USER
    definitions: list[Definition] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.frequency is not None and self.frequency < 0:
            raise ValidationError(
                "Frequency cannot be negative", field="frequency", value=self.frequency
            )

    @classmethod
    def create(
        cls,
        part_of_speech: PartOfSpeech,
        definitions: list[Definition],
        variant: str | None = None,
        gender: Gender | None = None,
        phonetic: str | None = None,
        forms: str | None = None,
        frequency: int | None = None,
        source: SourceType = SourceType.USER,
    ) -> "WordDetail":
        return cls(
            id=WordDetailId.generate(),
            part_of_speech=part_of_speech,
            variant=variant,
            gender=gender,
            phonetic=phonetic,
            forms=forms,
            frequency=frequency,
            source=source,
            definitions=list(definitions),
        )


@dataclass
class Word(AggregateRoot[WordId]):
    """
    Shared catalogue word.

    Business Rules:
    - Text is trimmed, non-empty and at most MAX_WORD_LENGTH characters
    - (text, language_code) is unique (enforced at repository level)
    - A word can exist without details; definitions always hang off a detail
    """

    id: WordId
    text: str
    language_code: LanguageCode
    phonetic: str | None = None
    frequency: int | None = None
    etymology: str | None = None
    details: list[WordDetail] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValidationError("Word text cannot be empty", field="text", value=self.text)
        if len(self.text) > MAX_WORD_LENGTH:
            raise ValidationError(
                f"Word text cannot exceed {MAX_WORD_LENGTH} characters", field="text"
            )

    @property
    def definitions(self) -> list[Definition]:
        return [definition for detail in self.details for definition in detail.definitions]

    @property
    def definition_count(self) -> int:
        return len(self.definitions)

    def find_definition(self, definition_id: DefinitionId) -> Definition | None:
        for definition in self.definitions:
            if definition.id == definition_id:
                return definition
        return None

    def add_detail(self, detail: WordDetail) -> None:
        self.details.append(detail)

    @classmethod
    def create(
        cls,
        text: str,
        language_code: LanguageCode,
        phonetic: str | None = None,
        frequency: int | None = None,
        etymology: str | None = None,
        details: list[WordDetail] | None = None,
    ) -> "Word":
        """Create a new word (ID will be 0 until persisted)."""
        return cls(
            id=WordId.generate(),
            text=text.strip(),
            language_code=language_code,
            phonetic=phonetic,
            frequency=frequency,
            etymology=etymology,
            details=list(details or []),
        )
