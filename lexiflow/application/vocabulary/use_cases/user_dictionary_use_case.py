"""Use case for the user's personal dictionary."""

from collections import Counter
from datetime import datetime
from statistics import mean

import structlog

from lexiflow.application.common.pagination import PaginatedResult, Pagination
from lexiflow.application.dictionary.protocols.word_repository import WordRepositoryProtocol
from lexiflow.application.vocabulary.dtos import DictionaryStats, UserWordFilters
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.domain.common.value_objects.ids import DefinitionId, UserId, UserWordId
from lexiflow.domain.dictionary.exceptions import DefinitionNotFoundError
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.exceptions import (
    UserWordNotFoundError,
    WordAlreadyInDictionaryError,
)
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_to, utc_now

logger = structlog.get_logger(__name__)


class UserDictionaryUseCase:
    """Add, browse, customize and remove dictionary entries."""

    def __init__(
        self,
        user_word_repository: UserWordRepositoryProtocol,
        word_repository: WordRepositoryProtocol,
    ) -> None:
        self.user_word_repository = user_word_repository
        self.word_repository = word_repository

    def add_to_dictionary(
        self, user_id: int, definition_id: int, base_language_code: LanguageCode
    ) -> UserWord:
        """
        Add a catalogue definition to the user's dictionary.

        A previously removed entry for the same definition is restored with its
        progress instead of creating a new one.

        Args:
            user_id: ID of the user
            definition_id: Catalogue definition to add
            base_language_code: The user's base language

        Returns:
            The new or restored entry

        Raises:
            DefinitionNotFoundError: If the definition does not exist
            WordAlreadyInDictionaryError: If an active entry already exists
        """
        user_id_vo = UserId(user_id)
        definition_id_vo = DefinitionId(definition_id)

        word = self.word_repository.find_word_by_definition(definition_id_vo)
        if not word:
            raise DefinitionNotFoundError(definition_id)

        existing = self.user_word_repository.find_by_definition(user_id_vo, definition_id_vo)
        if existing and not existing.is_deleted:
            raise WordAlreadyInDictionaryError(definition_id)

        if existing:
            existing.restore()
            user_word = self.user_word_repository.save(existing)
            logger.info(
                "dictionary_entry_restored", user_id=user_id, user_word_id=user_word.id.value
            )
            return user_word

        user_word = UserWord.create(
            user_id=user_id_vo,
            definition_id=definition_id_vo,
            base_language_code=base_language_code,
            target_language_code=word.language_code,
        )
        user_word = self.user_word_repository.save(user_word)

        logger.info(
            "dictionary_entry_added",
            user_id=user_id,
            user_word_id=user_word.id.value,
            definition_id=definition_id,
        )
        return user_word

    def list_words(
        self, user_id: int, filters: UserWordFilters, page: int = 1, page_size: int = 20
    ) -> PaginatedResult[UserWord]:
        pagination = Pagination(page=page, page_size=page_size)
        items, total = self.user_word_repository.find_page(
            UserId(user_id), filters, pagination, utc_now()
        )
        return PaginatedResult(items=items, total=total, pagination=pagination)

    def get_word(self, user_id: int, user_word_id: int) -> UserWord:
        user_word = self.user_word_repository.find_by_id(UserWordId(user_word_id), UserId(user_id))
        if not user_word:
            raise UserWordNotFoundError(user_word_id)
        return user_word

    def customize_word(
        self,
        user_id: int,
        user_word_id: int,
        custom_definition: str | None = None,
        custom_translation: str | None = None,
        custom_phonetic: str | None = None,
        custom_notes: str | None = None,
        custom_tags: list[str] | None = None,
        custom_difficulty_level: DifficultyLevel | None = None,
    ) -> UserWord:
        """
        Override catalogue content for this user only.

        Passing an empty string clears a custom field. Any change marks the
        entry as modified.

        Raises:
            UserWordNotFoundError: If the entry does not exist
        """
        user_word = self.get_word(user_id, user_word_id)
        user_word.customize(
            custom_definition=custom_definition,
            custom_translation=custom_translation,
            custom_phonetic=custom_phonetic,
            custom_notes=custom_notes,
            custom_tags=custom_tags,
            custom_difficulty_level=custom_difficulty_level,
        )
        user_word = self.user_word_repository.save(user_word)

        logger.info("dictionary_entry_customized", user_id=user_id, user_word_id=user_word_id)
        return user_word

    def toggle_favorite(self, user_id: int, user_word_id: int) -> UserWord:
        user_word = self.get_word(user_id, user_word_id)
        is_favorite = user_word.toggle_favorite()
        user_word = self.user_word_repository.save(user_word)

        logger.info(
            "dictionary_entry_favorite_toggled",
            user_id=user_id,
            user_word_id=user_word_id,
            is_favorite=is_favorite,
        )
        return user_word

    def remove_word(self, user_id: int, user_word_id: int) -> None:
        """Soft delete an entry; its progress is kept for a later restore."""
        user_word = self.get_word(user_id, user_word_id)
        user_word.soft_delete(utc_now())
        self.user_word_repository.save(user_word)

        logger.info("dictionary_entry_removed", user_id=user_id, user_word_id=user_word_id)

    def restore_word(self, user_id: int, user_word_id: int) -> UserWord:
        """
        Raises:
            UserWordNotFoundError: If the entry does not exist
            DomainError: If the entry is not deleted
        """
        user_word = self.user_word_repository.find_by_id(
            UserWordId(user_word_id), UserId(user_id), include_deleted=True
        )
        if not user_word:
            raise UserWordNotFoundError(user_word_id)

        user_word.restore()
        user_word = self.user_word_repository.save(user_word)

        logger.info("dictionary_entry_restored", user_id=user_id, user_word_id=user_word_id)
        return user_word

    def skip_word(self, user_id: int, user_word_id: int) -> UserWord:
        user_word = self.get_word(user_id, user_word_id)
        user_word.record_skip(utc_now())
        user_word = self.user_word_repository.save(user_word)

        logger.info(
            "dictionary_entry_skipped",
            user_id=user_id,
            user_word_id=user_word_id,
            skip_count=user_word.skip_count,
        )
        return user_word

    def update_learning_status(
        self,
        user_id: int,
        user_word_id: int,
        learning_status: LearningStatus,
        progress: float | None = None,
        mastery_score: float | None = None,
        next_review_due: datetime | None = None,
    ) -> UserWord:
        """
        Set an entry's learning status by hand.

        Counts as a review: the review counter and last review time move.

        Raises:
            UserWordNotFoundError: If the entry does not exist
            ValidationError: If progress or mastery_score is outside 0..100
        """
        user_word = self.get_word(user_id, user_word_id)
        user_word.set_learning_status(
            learning_status,
            utc_now(),
            progress=progress,
            mastery_score=mastery_score,
            next_review_due=next_review_due,
        )
        user_word = self.user_word_repository.save(user_word)

        logger.info(
            "dictionary_entry_status_updated",
            user_id=user_id,
            user_word_id=user_word_id,
            learning_status=learning_status.value,
        )
        return user_word

    def get_stats(self, user_id: int) -> DictionaryStats:
        entries = self.user_word_repository.find_active(UserId(user_id))
        now = utc_now()
        breakdown = Counter(entry.learning_status for entry in entries)
        return DictionaryStats(
            total_words=len(entries),
            favorite_words=sum(1 for entry in entries if entry.is_favorite),
            words_needing_review=sum(
                1
                for entry in entries
                if entry.next_review_due is not None and entry.next_review_due <= now
            ),
            average_mastery_score=(
                round_to(mean(entry.mastery_score for entry in entries), 2) if entries else 0.0
            ),
            status_breakdown={status: breakdown.get(status, 0) for status in LearningStatus},
        )
