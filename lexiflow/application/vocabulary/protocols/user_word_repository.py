"""Protocol for dictionary entries."""

from datetime import datetime
from typing import Protocol

from lexiflow.application.common.pagination import Pagination
from lexiflow.application.vocabulary.dtos import UserWordFilters
from lexiflow.domain.common.value_objects.ids import DefinitionId, UserId, UserWordId
from lexiflow.domain.vocabulary.entities.user_word import UserWord


class UserWordRepositoryProtocol(Protocol):
    """Entries are always returned with their ``content`` snapshot loaded."""

    def find_by_id(
        self, user_word_id: UserWordId, user_id: UserId, include_deleted: bool = False
    ) -> UserWord | None:
        """
        Find an entry by ID with user ownership check.

        Args:
            user_word_id: The entry ID
            user_id: The owner
            include_deleted: Also return soft-deleted entries

        Returns:
            UserWord if found and owned by the user, None otherwise
        """
        ...

    def find_by_definition(
        self, user_id: UserId, definition_id: DefinitionId, include_deleted: bool = True
    ) -> UserWord | None: ...

    def find_by_ids(self, user_word_ids: list[UserWordId], user_id: UserId) -> list[UserWord]:
        """Active entries among ``user_word_ids``, in the given order."""
        ...

    def find_page(
        self,
        user_id: UserId,
        filters: UserWordFilters,
        pagination: Pagination,
        now: datetime,
    ) -> tuple[list[UserWord], int]:
        """
        Find active entries matching the filters.

        Returns:
            Tuple of (entries for the requested page, total count)
        """
        ...

    def find_active(
        self, user_id: UserId, user_word_ids: list[UserWordId] | None = None
    ) -> list[UserWord]:
        """All active entries of the user, optionally restricted to ``user_word_ids``."""
        ...

    def save(self, user_word: UserWord) -> UserWord: ...
