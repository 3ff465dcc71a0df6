from lexiflow.domain.common.value_objects.ids import (
    DefinitionId,
    LearningMistakeId,
    UserId,
    UserWordId,
)
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.value_objects import MistakeType
from lexiflow.models import LearningMistake as LearningMistakeORM
from lexiflow.utils import ensure_utc


class LearningMistakeMapper:
    def to_domain(self, orm_model: LearningMistakeORM) -> LearningMistake:
        return LearningMistake(
            id=LearningMistakeId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            user_word_id=UserWordId(orm_model.user_word_id),
            definition_id=DefinitionId(orm_model.definition_id),
            mistake_type=MistakeType(orm_model.mistake_type),
            incorrect_value=orm_model.incorrect_value,
            context=dict(orm_model.context or {}),
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: LearningMistake) -> LearningMistakeORM:
        orm_model = LearningMistakeORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            user_word_id=domain_entity.user_word_id.value,
            definition_id=domain_entity.definition_id.value,
            mistake_type=domain_entity.mistake_type.value,
            incorrect_value=domain_entity.incorrect_value,
            context=dict(domain_entity.context),
        )
        if domain_entity.created_at is not None:
            orm_model.created_at = domain_entity.created_at
        return orm_model
