"""Pydantic schemas for catalogue word request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from lexiflow.application.dictionary.dtos import NewDefinition, NewWordDetail
from lexiflow.domain.dictionary.entities.word import Definition, Word, WordDetail
from lexiflow.domain.dictionary.value_objects import (
    Gender,
    LanguageCode,
    PartOfSpeech,
    SourceType,
)


class DefinitionCreate(BaseModel):
    text: str = Field(..., min_length=1, description="Definition text")
    translation: str | None = Field(None, description="Translation into the base language")
    image_url: str | None = None
    audio_url: str | None = None
    usage_note: str | None = None
    examples: list[str] = Field(default_factory=list, description="Example sentences")
    source: SourceType = SourceType.USER

    def to_dto(self) -> NewDefinition:
        return NewDefinition(
            text=self.text,
            translation=self.translation,
            image_url=self.image_url,
            audio_url=self.audio_url,
            usage_note=self.usage_note,
            examples=list(self.examples),
            source=self.source,
        )


class WordDetailCreate(BaseModel):
    part_of_speech: PartOfSpeech = PartOfSpeech.UNDEFINED
    variant: str | None = None
    gender: Gender | None = None
    phonetic: str | None = None
    forms: str | None = Field(None, description="Comma separated inflected forms")
    frequency: int | None = Field(None, ge=0)
    source: SourceType = SourceType.USER
    definitions: list[DefinitionCreate] = Field(default_factory=list)

    def to_dto(self) -> NewWordDetail:
        return NewWordDetail(
            part_of_speech=self.part_of_speech,
            definitions=[definition.to_dto() for definition in self.definitions],
            variant=self.variant,
            gender=self.gender,
            phonetic=self.phonetic,
            forms=self.forms,
            frequency=self.frequency,
            source=self.source,
        )


class WordCreateRequest(BaseModel):
    """Schema for creating a catalogue word."""

    text: str = Field(..., min_length=1, max_length=255, description="Headword")
    language_code: LanguageCode = Field(..., description="Language of the word")
    phonetic: str | None = None
    frequency: int | None = Field(None, ge=0, description="General frequency rank")
    etymology: str | None = None
    details: list[WordDetailCreate] = Field(default_factory=list)


class DefinitionResponse(BaseModel):
    id: int
    text: str
    language_code: LanguageCode
    source: SourceType
    translation: str | None = None
    image_url: str | None = None
    audio_url: str | None = None
    usage_note: str | None = None
    examples: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, definition: Definition) -> "DefinitionResponse":
        return cls(
            id=definition.id.value,
            text=definition.text,
            language_code=definition.language_code,
            source=definition.source,
            translation=definition.translation,
            image_url=definition.image_url,
            audio_url=definition.audio_url,
            usage_note=definition.usage_note,
            examples=definition.examples,
        )


class WordDetailResponse(BaseModel):
    id: int
    part_of_speech: PartOfSpeech
    variant: str | None = None
    gender: Gender | None = None
    phonetic: str | None = None
    forms: str | None = None
    frequency: int | None = None
    source: SourceType
    definitions: list[DefinitionResponse]

    @classmethod
    def from_domain(cls, detail: WordDetail) -> "WordDetailResponse":
        return cls(
            id=detail.id.value,
            part_of_speech=detail.part_of_speech,
            variant=detail.variant,
            gender=detail.gender,
            phonetic=detail.phonetic,
            forms=detail.forms,
            frequency=detail.frequency,
            source=detail.source,
            definitions=[DefinitionResponse.from_domain(d) for d in detail.definitions],
        )


class WordSummary(BaseModel):
    """Compact word representation used in search results."""

    id: int
    text: str
    language_code: LanguageCode
    phonetic: str | None = None
    definition_count: int

    @classmethod
    def from_domain(cls, word: Word) -> "WordSummary":
        return cls(
            id=word.id.value,
            text=word.text,
            language_code=word.language_code,
            phonetic=word.phonetic,
            definition_count=word.definition_count,
        )


class WordResponse(BaseModel):
    """Schema for a catalogue word with its full detail tree."""

    id: int
    text: str
    language_code: LanguageCode
    phonetic: str | None = None
    frequency: int | None = None
    etymology: str | None = None
    details: list[WordDetailResponse]
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, word: Word) -> "WordResponse":
        return cls(
            id=word.id.value,
            text=word.text,
            language_code=word.language_code,
            phonetic=word.phonetic,
            frequency=word.frequency,
            etymology=word.etymology,
            details=[WordDetailResponse.from_domain(detail) for detail in word.details],
            created_at=word.created_at,
        )


class DefinitionLookupResponse(BaseModel):
    """A definition together with the word it belongs to."""

    word: WordSummary
    definition: DefinitionResponse
