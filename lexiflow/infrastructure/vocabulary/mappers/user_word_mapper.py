"""
Mapper for converting between UserWord ORM models and domain entities.

The catalogue content behind an entry is flattened into a ``WordContent``
snapshot while loading; it is never written back.
"""

from lexiflow.domain.common.value_objects.ids import DefinitionId, UserId, UserWordId, WordId
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode, PartOfSpeech
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus, WordContent
from lexiflow.models import Definition as DefinitionORM
from lexiflow.models import UserWord as UserWordORM
from lexiflow.utils import ensure_utc


class UserWordMapper:
    """Mapper for UserWord ORM ↔ Domain conversion."""

    def content_to_domain(self, definition: DefinitionORM) -> WordContent:
        detail = definition.word_detail
        word = detail.word
        return WordContent(
            word_id=WordId(word.id),
            definition_id=DefinitionId(definition.id),
            word_text=word.text,
            definition_text=definition.text,
            part_of_speech=PartOfSpeech(detail.part_of_speech),
            translation=definition.translation,
            phonetic=detail.phonetic or word.phonetic,
            image_url=definition.image_url,
            audio_url=definition.audio_url,
            frequency=word.frequency,
            definition_count=len(detail.definitions) or 1,
        )

    def to_domain(self, orm_model: UserWordORM) -> UserWord:
        return UserWord(
            id=UserWordId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            definition_id=DefinitionId(orm_model.definition_id),
            base_language_code=LanguageCode(orm_model.base_language_code),
            target_language_code=LanguageCode(orm_model.target_language_code),
            custom_definition=orm_model.custom_definition,
            custom_translation=orm_model.custom_translation,
            custom_phonetic=orm_model.custom_phonetic,
            custom_notes=orm_model.custom_notes,
            custom_tags=list(orm_model.custom_tags or []),
            custom_difficulty_level=(
                DifficultyLevel(orm_model.custom_difficulty_level)
                if orm_model.custom_difficulty_level
                else None
            ),
            is_modified=orm_model.is_modified,
            is_favorite=orm_model.is_favorite,
            learning_status=LearningStatus(orm_model.learning_status),
            progress=orm_model.progress,
            review_count=orm_model.review_count,
            amount_of_mistakes=orm_model.amount_of_mistakes,
            correct_streak=orm_model.correct_streak,
            skip_count=orm_model.skip_count,
            mastery_score=orm_model.mastery_score,
            last_reviewed_at=ensure_utc(orm_model.last_reviewed_at),
            started_learning_at=ensure_utc(orm_model.started_learning_at),
            learned_at=ensure_utc(orm_model.learned_at),
            next_review_due=ensure_utc(orm_model.next_review_due),
            srs_level=orm_model.srs_level,
            srs_interval=orm_model.srs_interval,
            last_srs_success=orm_model.last_srs_success,
            next_srs_review=ensure_utc(orm_model.next_srs_review),
            last_used_in_context=ensure_utc(orm_model.last_used_in_context),
            usage_count=orm_model.usage_count,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
            deleted_at=ensure_utc(orm_model.deleted_at),
            content=self.content_to_domain(orm_model.definition),
        )

    def to_orm(self, domain_entity: UserWord, orm_model: UserWordORM | None = None) -> UserWordORM:
        if orm_model is None:
            orm_model = UserWordORM(
                id=domain_entity.id.value if domain_entity.id.value != 0 else None,
                user_id=domain_entity.user_id.value,
                definition_id=domain_entity.definition_id.value,
            )

        orm_model.base_language_code = domain_entity.base_language_code.value
        orm_model.target_language_code = domain_entity.target_language_code.value
        orm_model.custom_definition = domain_entity.custom_definition
        orm_model.custom_translation = domain_entity.custom_translation
        orm_model.custom_phonetic = domain_entity.custom_phonetic
        orm_model.custom_notes = domain_entity.custom_notes
        orm_model.custom_tags = list(domain_entity.custom_tags)
        orm_model.custom_difficulty_level = (
            domain_entity.custom_difficulty_level.value
            if domain_entity.custom_difficulty_level
            else None
        )
        orm_model.is_modified = domain_entity.is_modified
        orm_model.is_favorite = domain_entity.is_favorite
        orm_model.learning_status = domain_entity.learning_status.value
        orm_model.progress = domain_entity.progress
        orm_model.review_count = domain_entity.review_count
        orm_model.amount_of_mistakes = domain_entity.amount_of_mistakes
        orm_model.correct_streak = domain_entity.correct_streak
        orm_model.skip_count = domain_entity.skip_count
        orm_model.mastery_score = domain_entity.mastery_score
        orm_model.last_reviewed_at = domain_entity.last_reviewed_at
        orm_model.started_learning_at = domain_entity.started_learning_at
        orm_model.learned_at = domain_entity.learned_at
        orm_model.next_review_due = domain_entity.next_review_due
        orm_model.srs_level = domain_entity.srs_level
        orm_model.srs_interval = domain_entity.srs_interval
        orm_model.last_srs_success = domain_entity.last_srs_success
        orm_model.next_srs_review = domain_entity.next_srs_review
        orm_model.last_used_in_context = domain_entity.last_used_in_context
        orm_model.usage_count = domain_entity.usage_count
        orm_model.deleted_at = domain_entity.deleted_at
        return orm_model
