"""Use case for the shared word catalogue."""

import structlog

from lexiflow.application.common.pagination import PaginatedResult, Pagination
from lexiflow.application.dictionary.dtos import NewWordDetail
from lexiflow.application.dictionary.protocols.word_repository import WordRepositoryProtocol
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import DefinitionId, WordId
from lexiflow.domain.dictionary.entities.word import Definition, Word, WordDetail
from lexiflow.domain.dictionary.exceptions import (
    DefinitionNotFoundError,
    WordAlreadyExistsError,
    WordNotFoundError,
)
from lexiflow.domain.dictionary.value_objects import LanguageCode

logger = structlog.get_logger(__name__)


class WordUseCase:
    """Create, look up, search and delete catalogue words."""

    def __init__(self, word_repository: WordRepositoryProtocol) -> None:
        self.word_repository = word_repository

    def create_word(
        self,
        text: str,
        language_code: LanguageCode,
        details: list[NewWordDetail] | None = None,
        phonetic: str | None = None,
        frequency: int | None = None,
        etymology: str | None = None,
    ) -> Word:
        """
        Create a word together with its details and definitions.

        Definitions inherit the word's language.

        Args:
            text: Headword; trimmed before storing
            language_code: Language of the word
            details: Part-of-speech senses, each with its definitions
            phonetic: Optional transcription
            frequency: Optional general frequency rank
            etymology: Optional origin notes

        Returns:
            The persisted word with generated ids

        Raises:
            ValidationError: If the text or any definition is empty
            WordAlreadyExistsError: If the (text, language) pair exists
        """
        if frequency is not None and frequency < 0:
            raise ValidationError("Frequency cannot be negative", field="frequency", value=frequency)

        word_details = [
            WordDetail.create(
                part_of_speech=detail.part_of_speech,
                variant=detail.variant,
                gender=detail.gender,
                phonetic=detail.phonetic,
                forms=detail.forms,
                frequency=detail.frequency,
                source=detail.source,
                definitions=[
                    Definition.create(
                        text=definition.text,
                        language_code=language_code,
                        source=definition.source,
                        translation=definition.translation,
                        image_url=definition.image_url,
                        audio_url=definition.audio_url,
                        usage_note=definition.usage_note,
                        examples=definition.examples,
                    )
                    for definition in detail.definitions
                ],
            )
            for detail in details or []
        ]
        word = Word.create(
            text=text,
            language_code=language_code,
            phonetic=phonetic,
            frequency=frequency,
            etymology=etymology,
            details=word_details,
        )

        if self.word_repository.find_by_text(word.text, language_code):
            raise WordAlreadyExistsError(word.text, language_code.value)

        word = self.word_repository.save(word)

        logger.info(
            "word_created",
            word_id=word.id.value,
            language_code=language_code.value,
            definition_count=word.definition_count,
        )
        return word

    def get_word(self, word_id: int) -> Word:
        word = self.word_repository.find_by_id(WordId(word_id))
        if not word:
            raise WordNotFoundError(word_id)
        return word

    def get_definition(self, definition_id: int) -> tuple[Word, Definition]:
        """
        Get a definition together with the word it belongs to.

        Raises:
            DefinitionNotFoundError: If the definition does not exist
        """
        definition_id_vo = DefinitionId(definition_id)
        word = self.word_repository.find_word_by_definition(definition_id_vo)
        definition = word.find_definition(definition_id_vo) if word else None
        if not word or not definition:
            raise DefinitionNotFoundError(definition_id)
        return word, definition

    def search_words(
        self,
        query: str | None = None,
        language_code: LanguageCode | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> PaginatedResult[Word]:
        """Search the catalogue by text prefix, optionally within one language."""
        pagination = Pagination(page=page, page_size=page_size)
        cleaned = query.strip() if query else None
        words, total = self.word_repository.search(cleaned or None, language_code, pagination)
        return PaginatedResult(items=words, total=total, pagination=pagination)

    def delete_word(self, word_id: int) -> None:
        """
        Delete a word with all of its details and definitions.

        Raises:
            WordNotFoundError: If the word does not exist
        """
        if not self.word_repository.delete(WordId(word_id)):
            raise WordNotFoundError(word_id)

        logger.info("word_deleted", word_id=word_id)
