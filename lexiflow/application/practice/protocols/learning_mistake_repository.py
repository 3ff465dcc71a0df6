from datetime import datetime
from typing import Protocol

from lexiflow.domain.common.value_objects.ids import UserId, UserWordId
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake


class LearningMistakeRepositoryProtocol(Protocol):
    def find_by_user_word(self, user_word_id: UserWordId, user_id: UserId) -> list[LearningMistake]:
        """Mistakes logged for one dictionary entry, oldest first."""
        ...

    def find_by_user(self, user_id: UserId, since: datetime | None = None) -> list[LearningMistake]:
        """All mistakes of a learner, newest first, optionally only those logged since a moment."""
        ...

    def save(self, mistake: LearningMistake) -> LearningMistake: ...
