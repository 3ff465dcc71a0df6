"""
Domain-centric repository for the Word aggregate.

Returns domain entities instead of ORM models.
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session, selectinload

from lexiflow.application.common.pagination import Pagination
from lexiflow.domain.common.value_objects.ids import DefinitionId, WordId
from lexiflow.domain.dictionary.entities.word import Definition, Word
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.infrastructure.dictionary.mappers.word_mapper import WordMapper
from lexiflow.models import Definition as DefinitionORM
from lexiflow.models import Word as WordORM
from lexiflow.models import WordDetail as WordDetailORM

logger = logging.getLogger(__name__)


class WordRepository:
    """Repository for catalogue words with their details and definitions."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordMapper()

    def _base_query(self) -> Select[tuple[WordORM]]:
        return select(WordORM).options(
            selectinload(WordORM.details).selectinload(WordDetailORM.definitions)
        )

    def find_by_id(self, word_id: WordId) -> Word | None:
        stmt = self._base_query().where(WordORM.id == word_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_text(self, text: str, language_code: LanguageCode) -> Word | None:
        stmt = (
            self._base_query()
            .where(func.lower(WordORM.text) == text.strip().lower())
            .where(WordORM.language_code == language_code.value)
        )
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def search(
        self, query: str | None, language_code: LanguageCode | None, pagination: Pagination
    ) -> tuple[list[Word], int]:
        """
        Find words whose text starts with ``query`` (case-insensitive).

        Returns:
            Tuple of (words for the page ordered by text, total count)
        """
        conditions = []
        if query:
            conditions.append(WordORM.text.ilike(f"{query}%"))
        if language_code:
            conditions.append(WordORM.language_code == language_code.value)

        count_stmt = select(func.count(WordORM.id)).where(*conditions)
        total = self.db.execute(count_stmt).scalar() or 0

        stmt = (
            self._base_query()
            .where(*conditions)
            .order_by(WordORM.text, WordORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def find_definition(self, definition_id: DefinitionId) -> Definition | None:
        orm_model = self.db.get(DefinitionORM, definition_id.value)
        return self.mapper.definition_to_domain(orm_model) if orm_model else None

    def find_word_by_definition(self, definition_id: DefinitionId) -> Word | None:
        stmt = (
            self._base_query()
            .join(WordDetailORM, WordDetailORM.word_id == WordORM.id)
            .join(DefinitionORM, DefinitionORM.word_detail_id == WordDetailORM.id)
            .where(DefinitionORM.id == definition_id.value)
        )
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, word: Word) -> Word:
        """
        Persist a word.

        New words are inserted with their whole detail and definition tree.
        Existing words only have their own columns updated.
        """
        if word.id.value == 0:
            orm_model = self.mapper.to_orm(word)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(
                f"Created word '{orm_model.text}' ({orm_model.language_code}) id={orm_model.id}"
            )
            return self.mapper.to_domain(orm_model)

        existing = self.db.get(WordORM, word.id.value)
        if not existing:
            raise ValueError(f"Word with id {word.id.value} not found")

        self.mapper.to_orm(word, existing)
        self.db.commit()
        self.db.refresh(existing)
        return self.mapper.to_domain(existing)

    def delete(self, word_id: WordId) -> bool:
        """
        Delete a word with its details and definitions.

        Returns:
            True if the word existed
        """
        orm_model = self.db.get(WordORM, word_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted word {word_id.value}")
        return True
