"""Use case for official and community word lists."""

import structlog

from lexiflow.application.common.pagination import PaginatedResult, Pagination
from lexiflow.application.dictionary.dtos import WordListFilters
from lexiflow.application.dictionary.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from lexiflow.application.dictionary.protocols.word_list_repository import (
    WordListRepositoryProtocol,
)
from lexiflow.application.dictionary.protocols.word_repository import WordRepositoryProtocol
from lexiflow.domain.common.value_objects.ids import CategoryId, DefinitionId, UserId, WordListId
from lexiflow.domain.dictionary.entities.word_list import WordList
from lexiflow.domain.dictionary.exceptions import (
    CategoryNotFoundError,
    DefinitionNotFoundError,
    WordListNotFoundError,
)
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode

logger = structlog.get_logger(__name__)


class WordListUseCase:
    """Browse and curate word lists."""

    def __init__(
        self,
        word_list_repository: WordListRepositoryProtocol,
        word_repository: WordRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
    ) -> None:
        self.word_list_repository = word_list_repository
        self.word_repository = word_repository
        self.category_repository = category_repository

    def create_list(
        self,
        user_id: int | None,
        name: str,
        base_language_code: LanguageCode,
        target_language_code: LanguageCode,
        description: str | None = None,
        category_id: int | None = None,
        is_public: bool = True,
        tags: list[str] | None = None,
        cover_image_url: str | None = None,
        difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER,
        definition_ids: list[int] | None = None,
    ) -> WordList:
        """
        Create a word list.

        Args:
            user_id: Owner of the list, or None for an official list
            name: Display name
            base_language_code: Language of translations
            target_language_code: Language being learned
            description: Optional description
            category_id: Optional category
            is_public: Whether other users can browse the list
            tags: Free-form tags, normalized to lowercase
            cover_image_url: Optional cover
            difficulty_level: Difficulty band
            definition_ids: Initial definitions in display order

        Returns:
            The persisted list

        Raises:
            CategoryNotFoundError: If the category does not exist
            DefinitionNotFoundError: If any definition does not exist
        """
        category_id_vo = self._require_category(category_id)

        word_list = WordList.create(
            name=name,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            owner_id=UserId(user_id) if user_id is not None else None,
            description=description,
            category_id=category_id_vo,
            is_public=is_public,
            tags=tags,
            cover_image_url=cover_image_url,
            difficulty_level=difficulty_level,
        )
        for definition_id in definition_ids or []:
            word_list.add_definition(self._require_definition(definition_id))

        word_list = self.word_list_repository.save(word_list)

        logger.info(
            "word_list_created",
            list_id=word_list.id.value,
            user_id=user_id,
            word_count=word_list.word_count,
        )
        return word_list

    def get_list(self, list_id: int, user_id: int | None = None) -> WordList:
        """
        Get a list visible to the user.

        Private lists are only visible to their owner.

        Raises:
            WordListNotFoundError: If missing, deleted or not visible
        """
        word_list = self.word_list_repository.find_by_id(WordListId(list_id))
        if not word_list or not self._is_visible(word_list, user_id):
            raise WordListNotFoundError(list_id)
        return word_list

    def list_lists(
        self, filters: WordListFilters, page: int = 1, page_size: int = 20
    ) -> PaginatedResult[WordList]:
        pagination = Pagination(page=page, page_size=page_size)
        lists, total = self.word_list_repository.find_filtered(filters, pagination)
        return PaginatedResult(items=lists, total=total, pagination=pagination)

    def update_list(
        self,
        list_id: int,
        user_id: int,
        name: str | None = None,
        description: str | None = None,
        difficulty_level: DifficultyLevel | None = None,
        is_public: bool | None = None,
        tags: list[str] | None = None,
        cover_image_url: str | None = None,
        category_id: int | None = None,
    ) -> WordList:
        """
        Update list details.

        Raises:
            WordListNotFoundError: If the list is not visible to the user
            AuthorizationError: If the user does not own the list
            CategoryNotFoundError: If the new category does not exist
        """
        word_list = self._get_editable(list_id, user_id)

        word_list.update_details(
            name=name,
            description=description,
            difficulty_level=difficulty_level,
            is_public=is_public,
            tags=tags,
            cover_image_url=cover_image_url,
            category_id=self._require_category(category_id),
        )
        word_list = self.word_list_repository.save(word_list)

        logger.info("word_list_updated", list_id=list_id, user_id=user_id)
        return word_list

    def delete_list(self, list_id: int, user_id: int) -> None:
        word_list = self._get_editable(list_id, user_id)
        word_list.soft_delete()
        self.word_list_repository.save(word_list)

        logger.info("word_list_deleted", list_id=list_id, user_id=user_id)

    def restore_list(self, list_id: int, user_id: int) -> WordList:
        """
        Restore a soft-deleted list.

        Raises:
            WordListNotFoundError: If the list does not exist
            AuthorizationError: If the user does not own the list
            DomainError: If the list is not deleted
        """
        word_list = self.word_list_repository.find_by_id(
            WordListId(list_id), include_deleted=True
        )
        if not word_list:
            raise WordListNotFoundError(list_id)
        word_list.ensure_editable_by(UserId(user_id))

        word_list.restore()
        word_list = self.word_list_repository.save(word_list)

        logger.info("word_list_restored", list_id=list_id, user_id=user_id)
        return word_list

    def add_definition(self, list_id: int, user_id: int, definition_id: int) -> WordList:
        """Append a definition; adding one that is already present is a no-op."""
        word_list = self._get_editable(list_id, user_id)
        if word_list.add_definition(self._require_definition(definition_id)):
            word_list = self.word_list_repository.save(word_list)
            logger.info(
                "word_list_definition_added",
                list_id=list_id,
                definition_id=definition_id,
                word_count=word_list.word_count,
            )
        return word_list

    def remove_definition(self, list_id: int, user_id: int, definition_id: int) -> WordList:
        """
        Raises:
            DefinitionNotFoundError: If the definition is not part of the list
        """
        word_list = self._get_editable(list_id, user_id)
        if not word_list.remove_definition(DefinitionId(definition_id)):
            raise DefinitionNotFoundError(definition_id)

        word_list = self.word_list_repository.save(word_list)
        logger.info(
            "word_list_definition_removed",
            list_id=list_id,
            definition_id=definition_id,
            word_count=word_list.word_count,
        )
        return word_list

    def _get_editable(self, list_id: int, user_id: int) -> WordList:
        word_list = self.get_list(list_id, user_id)
        word_list.ensure_editable_by(UserId(user_id))
        return word_list

    def _require_category(self, category_id: int | None) -> CategoryId | None:
        if category_id is None:
            return None
        category_id_vo = CategoryId(category_id)
        if not self.category_repository.find_by_id(category_id_vo):
            raise CategoryNotFoundError(category_id)
        return category_id_vo

    def _require_definition(self, definition_id: int) -> DefinitionId:
        definition_id_vo = DefinitionId(definition_id)
        if not self.word_repository.find_definition(definition_id_vo):
            raise DefinitionNotFoundError(definition_id)
        return definition_id_vo

    @staticmethod
    def _is_visible(word_list: WordList, user_id: int | None) -> bool:
        if word_list.is_public or word_list.owner_id is None:
            return True
        return user_id is not None and word_list.owner_id == UserId(user_id)
