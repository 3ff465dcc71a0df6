"""Protocol for the shared word catalogue."""

from typing import Protocol

from lexiflow.application.common.pagination import Pagination
from lexiflow.domain.common.value_objects.ids import DefinitionId, WordId
from lexiflow.domain.dictionary.entities.word import Definition, Word
from lexiflow.domain.dictionary.value_objects import LanguageCode


class WordRepositoryProtocol(Protocol):
    def find_by_id(self, word_id: WordId) -> Word | None: ...

    def find_by_text(self, text: str, language_code: LanguageCode) -> Word | None:
        """Case-insensitive exact lookup used for the uniqueness check."""
        ...

    def search(
        self, query: str | None, language_code: LanguageCode | None, pagination: Pagination
    ) -> tuple[list[Word], int]:
        """
        Find words whose text starts with ``query``.

        Returns:
            Tuple of (words for the requested page ordered by text, total count)
        """
        ...

    def find_definition(self, definition_id: DefinitionId) -> Definition | None: ...

    def find_word_by_definition(self, definition_id: DefinitionId) -> Word | None: ...

    def save(self, word: Word) -> Word:
        """Persist a new word with its details and definitions."""
        ...

    def delete(self, word_id: WordId) -> bool: ...
