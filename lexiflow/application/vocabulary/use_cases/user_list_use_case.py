"""Use case for the user's list collection."""

import structlog

from lexiflow.application.dictionary.protocols.word_list_repository import (
    WordListRepositoryProtocol,
)
from lexiflow.application.vocabulary.dtos import UserListDetails, UserListFilters
from lexiflow.application.vocabulary.protocols.user_list_repository import (
    UserListRepositoryProtocol,
)
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.domain.common.value_objects.ids import (
    DefinitionId,
    UserId,
    UserListId,
    UserWordId,
    WordListId,
)
from lexiflow.domain.dictionary.entities.word_list import WordList
from lexiflow.domain.dictionary.exceptions import WordListNotFoundError
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.domain.vocabulary.entities.user_list import UserList
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.exceptions import (
    ListAlreadyInCollectionError,
    UserListNotFoundError,
    UserWordNotFoundError,
)
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import utc_now

logger = structlog.get_logger(__name__)


class UserListUseCase:
    """Manage the lists in a user's collection and their progress."""

    def __init__(
        self,
        user_list_repository: UserListRepositoryProtocol,
        user_word_repository: UserWordRepositoryProtocol,
        word_list_repository: WordListRepositoryProtocol,
    ) -> None:
        self.user_list_repository = user_list_repository
        self.user_word_repository = user_word_repository
        self.word_list_repository = word_list_repository

    def list_collection(self, user_id: int, filters: UserListFilters) -> list[UserListDetails]:
        user_lists = self.user_list_repository.find_filtered(UserId(user_id), filters)
        return [self._details(user_list) for user_list in user_lists]

    def get_user_list(self, user_id: int, user_list_id: int) -> UserListDetails:
        return self._details(self._get(user_id, user_list_id))

    def add_list_to_collection(
        self, user_id: int, list_id: int, base_language_code: LanguageCode
    ) -> UserListDetails:
        """
        Adopt a public word list.

        Every definition of the list is added to the user's dictionary;
        entries that already exist are reused and removed ones restored.

        Args:
            user_id: ID of the user
            list_id: Public word list to adopt
            base_language_code: The user's base language

        Returns:
            The collection entry with its source list

        Raises:
            WordListNotFoundError: If the list is missing or private to someone else
            ListAlreadyInCollectionError: If the list is already in the collection
        """
        user_id_vo = UserId(user_id)
        word_list = self.word_list_repository.find_by_id(WordListId(list_id))
        if not word_list or not (
            word_list.is_public or word_list.owner_id in (None, user_id_vo)
        ):
            raise WordListNotFoundError(list_id)

        existing = self.user_list_repository.find_by_list_id(user_id_vo, word_list.id)
        if existing and not existing.is_deleted:
            raise ListAlreadyInCollectionError(list_id)

        user_word_ids = [
            self._ensure_entry(user_id_vo, definition_id, word_list, base_language_code).id
            for definition_id in word_list.definition_ids
        ]

        if existing:
            existing.restore()
            for user_word_id in user_word_ids:
                existing.add_word(user_word_id)
            user_list = existing
        else:
            user_list = UserList.create_from_list(
                user_id=user_id_vo,
                list_id=word_list.id,
                base_language_code=base_language_code,
                target_language_code=word_list.target_language_code,
                user_word_ids=user_word_ids,
            )

        self._refresh_progress(user_list)
        user_list = self.user_list_repository.save(user_list)

        logger.info(
            "list_added_to_collection",
            user_id=user_id,
            list_id=list_id,
            user_list_id=user_list.id.value,
            word_count=user_list.word_count,
        )
        return UserListDetails(user_list=user_list, word_list=word_list)

    def create_custom_list(
        self,
        user_id: int,
        name: str,
        base_language_code: LanguageCode,
        target_language_code: LanguageCode,
        description: str | None = None,
        difficulty: DifficultyLevel | None = None,
        user_word_ids: list[int] | None = None,
    ) -> UserListDetails:
        """
        Create a custom list from existing dictionary entries.

        Raises:
            ValidationError: If the name is empty
            UserWordNotFoundError: If any entry does not belong to the user
        """
        user_list = UserList.create_custom(
            user_id=UserId(user_id),
            name=name,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            description=description,
            difficulty=difficulty,
        )
        for user_word_id in user_word_ids or []:
            user_list.add_word(self._require_user_word(user_id, user_word_id).id)

        self._refresh_progress(user_list)
        user_list = self.user_list_repository.save(user_list)

        logger.info(
            "custom_list_created",
            user_id=user_id,
            user_list_id=user_list.id.value,
            word_count=user_list.word_count,
        )
        return UserListDetails(user_list=user_list)

    def update_user_list(
        self,
        user_id: int,
        user_list_id: int,
        custom_name: str | None = None,
        custom_description: str | None = None,
        custom_cover_image_url: str | None = None,
        custom_difficulty: DifficultyLevel | None = None,
    ) -> UserListDetails:
        user_list = self._get(user_id, user_list_id)
        user_list.customize(
            custom_name=custom_name,
            custom_description=custom_description,
            custom_cover_image_url=custom_cover_image_url,
            custom_difficulty=custom_difficulty,
        )
        user_list = self.user_list_repository.save(user_list)

        logger.info("user_list_updated", user_id=user_id, user_list_id=user_list_id)
        return self._details(user_list)

    def remove_from_collection(self, user_id: int, user_list_id: int) -> None:
        """Soft delete a collection entry; dictionary entries are kept."""
        user_list = self._get(user_id, user_list_id)
        user_list.soft_delete(utc_now())
        self.user_list_repository.save(user_list)

        logger.info("user_list_removed", user_id=user_id, user_list_id=user_list_id)

    def add_word(self, user_id: int, user_list_id: int, user_word_id: int) -> UserListDetails:
        user_list = self._get(user_id, user_list_id)
        entry = self._require_user_word(user_id, user_word_id)

        if user_list.add_word(entry.id):
            self._refresh_progress(user_list)
            user_list = self.user_list_repository.save(user_list)
            logger.info(
                "user_list_word_added",
                user_id=user_id,
                user_list_id=user_list_id,
                user_word_id=user_word_id,
            )
        return self._details(user_list)

    def remove_word(self, user_id: int, user_list_id: int, user_word_id: int) -> UserListDetails:
        """
        Raises:
            UserListNotFoundError: If the list is not in the collection
            UserWordNotFoundError: If the entry is not part of the list
        """
        user_list = self._get(user_id, user_list_id)
        if not user_list.remove_word(UserWordId(user_word_id)):
            raise UserWordNotFoundError(user_word_id)

        self._refresh_progress(user_list)
        user_list = self.user_list_repository.save(user_list)

        logger.info(
            "user_list_word_removed",
            user_id=user_id,
            user_list_id=user_list_id,
            user_word_id=user_word_id,
        )
        return self._details(user_list)

    def get_words(self, user_id: int, user_list_id: int) -> list[UserWord]:
        user_list = self._get(user_id, user_list_id)
        return self.user_word_repository.find_by_ids(user_list.user_word_ids, UserId(user_id))

    def refresh_progress(self, user_id: int, user_list_id: int) -> float:
        """Recompute and store the learned share of the list (0..100)."""
        user_list = self._get(user_id, user_list_id)
        progress = self._refresh_progress(user_list)
        self.user_list_repository.save(user_list)
        return progress

    def _refresh_progress(self, user_list: UserList) -> float:
        entries = self.user_word_repository.find_by_ids(user_list.user_word_ids, user_list.user_id)
        learned = sum(1 for entry in entries if entry.learning_status == LearningStatus.LEARNED)
        return user_list.update_progress(learned)

    def _ensure_entry(
        self,
        user_id: UserId,
        definition_id: DefinitionId,
        word_list: WordList,
        base_language_code: LanguageCode,
    ) -> UserWord:
        entry = self.user_word_repository.find_by_definition(user_id, definition_id)
        if entry and not entry.is_deleted:
            return entry
        if entry:
            entry.restore()
            return self.user_word_repository.save(entry)
        return self.user_word_repository.save(
            UserWord.create(
                user_id=user_id,
                definition_id=definition_id,
                base_language_code=base_language_code,
                target_language_code=word_list.target_language_code,
            )
        )

    def _get(self, user_id: int, user_list_id: int) -> UserList:
        user_list = self.user_list_repository.find_by_id(UserListId(user_list_id), UserId(user_id))
        if not user_list:
            raise UserListNotFoundError(user_list_id)
        return user_list

    def _require_user_word(self, user_id: int, user_word_id: int) -> UserWord:
        entry = self.user_word_repository.find_by_id(UserWordId(user_word_id), UserId(user_id))
        if not entry:
            raise UserWordNotFoundError(user_word_id)
        return entry

    def _details(self, user_list: UserList) -> UserListDetails:
        word_list = (
            self.word_list_repository.find_by_id(user_list.list_id, include_deleted=True)
            if user_list.list_id
            else None
        )
        return UserListDetails(user_list=user_list, word_list=word_list)
