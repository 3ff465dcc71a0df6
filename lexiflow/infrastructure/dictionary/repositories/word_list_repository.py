"""Domain-centric repository for word lists and categories."""

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, selectinload

from lexiflow.application.common.pagination import Pagination
from lexiflow.application.dictionary.dtos import WordListFilters
from lexiflow.domain.common.value_objects.ids import CategoryId, WordListId
from lexiflow.domain.dictionary.entities.word_list import Category, WordList
from lexiflow.infrastructure.dictionary.mappers.word_list_mapper import (
    CategoryMapper,
    WordListMapper,
)
from lexiflow.models import Category as CategoryORM
from lexiflow.models import WordList as WordListORM

logger = logging.getLogger(__name__)


class WordListRepository:
    """Repository for WordList persistence (domain-centric)."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordListMapper()

    def find_by_id(self, list_id: WordListId, include_deleted: bool = False) -> WordList | None:
        stmt = (
            select(WordListORM)
            .options(selectinload(WordListORM.entries))
            .where(WordListORM.id == list_id.value)
        )
        if not include_deleted:
            stmt = stmt.where(WordListORM.deleted_at.is_(None))

        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_filtered(
        self, filters: WordListFilters, pagination: Pagination
    ) -> tuple[list[WordList], int]:
        """
        Find non-deleted lists visible to the viewer.

        Official and public lists are always visible. The viewer's own private
        lists are included unless ``public_only`` is set.

        Returns:
            Tuple of (lists ordered by name, total count)
        """
        conditions = [WordListORM.deleted_at.is_(None)]

        if filters.public_only or filters.viewer_id is None:
            conditions.append(
                or_(WordListORM.is_public.is_(True), WordListORM.owner_id.is_(None))
            )
        else:
            conditions.append(
                or_(
                    WordListORM.is_public.is_(True),
                    WordListORM.owner_id.is_(None),
                    WordListORM.owner_id == filters.viewer_id,
                )
            )

        if filters.search:
            conditions.append(WordListORM.name.ilike(f"%{filters.search}%"))
        if filters.difficulty_level:
            conditions.append(WordListORM.difficulty_level == filters.difficulty_level.value)
        if filters.base_language_code:
            conditions.append(
                WordListORM.base_language_code == filters.base_language_code.value
            )
        if filters.target_language_code:
            conditions.append(
                WordListORM.target_language_code == filters.target_language_code.value
            )
        if filters.category_id is not None:
            conditions.append(WordListORM.category_id == filters.category_id)

        total = self.db.execute(select(func.count(WordListORM.id)).where(*conditions)).scalar() or 0

        stmt = (
            select(WordListORM)
            .options(selectinload(WordListORM.entries))
            .where(*conditions)
            .order_by(WordListORM.name, WordListORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def save(self, word_list: WordList) -> WordList:
        """Save a list including its ordered definitions (create or update)."""
        if word_list.id.value == 0:
            orm_model = self.mapper.to_orm(word_list)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created word list '{orm_model.name}' (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

        existing = self.db.get(WordListORM, word_list.id.value)
        if not existing:
            raise ValueError(f"Word list with id {word_list.id.value} not found")

        self.mapper.to_orm(word_list, existing)
        self.db.commit()
        self.db.refresh(existing)
        return self.mapper.to_domain(existing)


class CategoryRepository:
    """Repository for word list categories."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CategoryMapper()

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        orm_model = self.db.get(CategoryORM, category_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> Category | None:
        stmt = select(CategoryORM).where(func.lower(CategoryORM.name) == name.strip().lower())
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Category]:
        stmt = select(CategoryORM).order_by(CategoryORM.name)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save(self, category: Category) -> Category:
        orm_model = (
            self.db.get(CategoryORM, category.id.value) if category.id.value != 0 else None
        )
        orm_model = self.mapper.to_orm(category, orm_model)
        if category.id.value == 0:
            self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
