"""Protocol for word lists."""

from typing import Protocol

from lexiflow.application.common.pagination import Pagination
from lexiflow.application.dictionary.dtos import WordListFilters
from lexiflow.domain.common.value_objects.ids import WordListId
from lexiflow.domain.dictionary.entities.word_list import WordList


class WordListRepositoryProtocol(Protocol):
    def find_by_id(self, list_id: WordListId, include_deleted: bool = False) -> WordList | None:
        ...

    def find_filtered(
        self, filters: WordListFilters, pagination: Pagination
    ) -> tuple[list[WordList], int]:
        """
        Find non-deleted lists matching the filters.

        Returns:
            Tuple of (lists ordered by name, total count)
        """
        ...

    def save(self, word_list: WordList) -> WordList:
        """Save a list including its ordered definitions (create or update)."""
        ...
