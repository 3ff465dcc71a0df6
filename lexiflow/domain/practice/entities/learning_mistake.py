"""Mistake log entity."""

from dataclasses import dataclass, field
from datetime import datetime

from lexiflow.domain.common.entity import Entity
from lexiflow.domain.common.value_objects.ids import (
    DefinitionId,
    LearningMistakeId,
    UserId,
    UserWordId,
)
from lexiflow.domain.practice.value_objects import MistakeType


@dataclass
class LearningMistake(Entity[LearningMistakeId]):
    """A wrong answer, kept for error analytics."""

    id: LearningMistakeId
    user_id: UserId
    user_word_id: UserWordId
    definition_id: DefinitionId
    mistake_type: MistakeType
    incorrect_value: str | None = None
    context: dict[str, object] = field(default_factory=dict)
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        user_id: UserId,
        user_word_id: UserWordId,
        definition_id: DefinitionId,
        mistake_type: MistakeType,
        incorrect_value: str | None,
        context: dict[str, object],
        now: datetime | None = None,
    ) -> "LearningMistake":
        return cls(
            id=LearningMistakeId.generate(),
            user_id=user_id,
            user_word_id=user_word_id,
            definition_id=definition_id,
            mistake_type=mistake_type,
            incorrect_value=incorrect_value,
            context=dict(context),
            created_at=now,
        )
