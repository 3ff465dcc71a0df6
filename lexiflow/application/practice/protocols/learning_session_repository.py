"""Protocol for learning sessions and their items."""

from typing import Protocol

from lexiflow.application.common.pagination import Pagination
from lexiflow.application.practice.dtos import SessionHistoryFilters
from lexiflow.domain.common.value_objects.ids import LearningSessionId, UserId, UserWordId
from lexiflow.domain.practice.entities.learning_session import LearningSession, SessionItem


class LearningSessionRepositoryProtocol(Protocol):
    def find_by_id(self, session_id: LearningSessionId, user_id: UserId) -> LearningSession | None:
        """
        Find a session by ID with user ownership check.

        Returns:
            The session with its items ordered by creation, or None
        """
        ...

    def find_active(self, user_id: UserId) -> LearningSession | None:
        """The most recently started session that has not ended."""
        ...

    def find_history(
        self, user_id: UserId, filters: SessionHistoryFilters, pagination: Pagination
    ) -> tuple[list[LearningSession], int]:
        """
        Returns:
            Tuple of (sessions newest first, total count)
        """
        ...

    def find_all(self, user_id: UserId) -> list[LearningSession]:
        """Every session of the user, newest first."""
        ...

    def find_items_by_user_word(self, user_word_id: UserWordId, user_id: UserId) -> list[SessionItem]:
        """Items answered for one dictionary entry, oldest first."""
        ...

    def item_statistics(self, user_id: UserId) -> dict[int, tuple[int, float]]:
        """Per entry id: (number of items, average response time in ms)."""
        ...

    def save(self, session: LearningSession) -> LearningSession:
        """Save the session and any items not yet persisted."""
        ...
