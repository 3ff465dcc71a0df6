"""
Mapper for the Word aggregate.

Converts a word together with its details and definitions. Children are only
built for new words: catalogue words are immutable once created.
"""

from lexiflow.domain.common.value_objects.ids import DefinitionId, WordDetailId, WordId
from lexiflow.domain.dictionary.entities.word import Definition, Word, WordDetail
from lexiflow.domain.dictionary.value_objects import (
    Gender,
    LanguageCode,
    PartOfSpeech,
    SourceType,
)
from lexiflow.models import Definition as DefinitionORM
from lexiflow.models import Word as WordORM
from lexiflow.models import WordDetail as WordDetailORM
from lexiflow.utils import ensure_utc


class WordMapper:
    """Mapper for Word ORM ↔ Domain conversion."""

    def definition_to_domain(self, orm_model: DefinitionORM) -> Definition:
        return Definition(
            id=DefinitionId(orm_model.id),
            text=orm_model.text,
            language_code=LanguageCode(orm_model.language_code),
            source=SourceType(orm_model.source),
            translation=orm_model.translation,
            image_url=orm_model.image_url,
            audio_url=orm_model.audio_url,
            usage_note=orm_model.usage_note,
            examples=list(orm_model.examples or []),
            word_detail_id=WordDetailId(orm_model.word_detail_id),
        )

    def detail_to_domain(self, orm_model: WordDetailORM) -> WordDetail:
        return WordDetail(
            id=WordDetailId(orm_model.id),
            part_of_speech=PartOfSpeech(orm_model.part_of_speech),
            variant=orm_model.variant,
            gender=Gender(orm_model.gender) if orm_model.gender else None,
            phonetic=orm_model.phonetic,
            forms=orm_model.forms,
            frequency=orm_model.frequency,
            source=SourceType(orm_model.source),
            definitions=[self.definition_to_domain(d) for d in orm_model.definitions],
        )

    def to_domain(self, orm_model: WordORM) -> Word:
        return Word(
            id=WordId(orm_model.id),
            text=orm_model.text,
            language_code=LanguageCode(orm_model.language_code),
            phonetic=orm_model.phonetic,
            frequency=orm_model.frequency,
            etymology=orm_model.etymology,
            details=[self.detail_to_domain(detail) for detail in orm_model.details],
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Word, orm_model: WordORM | None = None) -> WordORM:
        if orm_model:
            orm_model.text = domain_entity.text
            orm_model.language_code = domain_entity.language_code.value
            orm_model.phonetic = domain_entity.phonetic
            orm_model.frequency = domain_entity.frequency
            orm_model.etymology = domain_entity.etymology
            return orm_model

        return WordORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            text=domain_entity.text,
            language_code=domain_entity.language_code.value,
            phonetic=domain_entity.phonetic,
            frequency=domain_entity.frequency,
            etymology=domain_entity.etymology,
            details=[self._detail_to_orm(detail) for detail in domain_entity.details],
        )

    def _detail_to_orm(self, detail: WordDetail) -> WordDetailORM:
        return WordDetailORM(
            part_of_speech=detail.part_of_speech.value,
            variant=detail.variant,
            gender=detail.gender.value if detail.gender else None,
            phonetic=detail.phonetic,
            forms=detail.forms,
            frequency=detail.frequency,
            source=detail.source.value,
            definitions=[
                DefinitionORM(
                    text=definition.text,
                    language_code=definition.language_code.value,
                    source=definition.source.value,
                    translation=definition.translation,
                    image_url=definition.image_url,
                    audio_url=definition.audio_url,
                    usage_note=definition.usage_note,
                    examples=list(definition.examples),
                )
                for definition in detail.definitions
            ],
        )
