"""Mappers for WordList and Category ORM ↔ Domain conversion."""

from lexiflow.domain.common.value_objects.ids import CategoryId, DefinitionId, UserId, WordListId
from lexiflow.domain.dictionary.entities.word_list import Category, WordList
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.models import Category as CategoryORM
from lexiflow.models import WordList as WordListORM
from lexiflow.models import WordListDefinition as WordListDefinitionORM
from lexiflow.utils import ensure_utc


class CategoryMapper:
    def to_domain(self, orm_model: CategoryORM) -> Category:
        return Category(
            id=CategoryId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
        )

    def to_orm(self, domain_entity: Category, orm_model: CategoryORM | None = None) -> CategoryORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            return orm_model

        return CategoryORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            name=domain_entity.name,
            description=domain_entity.description,
        )


class WordListMapper:
    """
    Mapper for WordList ORM ↔ Domain conversion.

    The ordered ``definition_ids`` of the entity become ``WordListDefinition``
    rows whose ``position`` is the index in that list.
    """

    def to_domain(self, orm_model: WordListORM) -> WordList:
        return WordList(
            id=WordListId(orm_model.id),
            name=orm_model.name,
            base_language_code=LanguageCode(orm_model.base_language_code),
            target_language_code=LanguageCode(orm_model.target_language_code),
            category_id=CategoryId(orm_model.category_id) if orm_model.category_id else None,
            description=orm_model.description,
            owner_id=UserId(orm_model.owner_id) if orm_model.owner_id else None,
            is_public=orm_model.is_public,
            tags=list(orm_model.tags or []),
            cover_image_url=orm_model.cover_image_url,
            difficulty_level=DifficultyLevel(orm_model.difficulty_level),
            definition_ids=[DefinitionId(entry.definition_id) for entry in orm_model.entries],
            learned_word_count=orm_model.learned_word_count,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
            deleted_at=ensure_utc(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: WordList, orm_model: WordListORM | None = None) -> WordListORM:
        if orm_model is None:
            orm_model = WordListORM(
                id=domain_entity.id.value if domain_entity.id.value != 0 else None
            )

        orm_model.name = domain_entity.name
        orm_model.description = domain_entity.description
        orm_model.base_language_code = domain_entity.base_language_code.value
        orm_model.target_language_code = domain_entity.target_language_code.value
        orm_model.category_id = (
            domain_entity.category_id.value if domain_entity.category_id else None
        )
        orm_model.owner_id = domain_entity.owner_id.value if domain_entity.owner_id else None
        orm_model.is_public = domain_entity.is_public
        orm_model.tags = list(domain_entity.tags)
        orm_model.cover_image_url = domain_entity.cover_image_url
        orm_model.difficulty_level = domain_entity.difficulty_level.value
        orm_model.learned_word_count = domain_entity.learned_word_count
        orm_model.deleted_at = domain_entity.deleted_at
        self._sync_entries(domain_entity, orm_model)
        return orm_model

    def _sync_entries(self, domain_entity: WordList, orm_model: WordListORM) -> None:
        existing = {entry.definition_id: entry for entry in orm_model.entries}
        wanted = [definition_id.value for definition_id in domain_entity.definition_ids]

        for definition_id, entry in existing.items():
            if definition_id not in wanted:
                orm_model.entries.remove(entry)

        for position, definition_id in enumerate(wanted):
            entry = existing.get(definition_id)
            if entry is None:
                orm_model.entries.append(
                    WordListDefinitionORM(definition_id=definition_id, position=position)
                )
            else:
                entry.position = position
