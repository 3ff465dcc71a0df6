"""
Domain-centric repository for dictionary entries.

Entries are always loaded with the catalogue content behind them.
"""

import logging
from datetime import datetime

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.orm import Session, joinedload

from lexiflow.application.common.pagination import Pagination
from lexiflow.application.vocabulary.dtos import SortOrder, UserWordFilters, UserWordSortField
from lexiflow.domain.common.value_objects.ids import DefinitionId, UserId, UserWordId
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.infrastructure.vocabulary.mappers.user_word_mapper import UserWordMapper
from lexiflow.models import Definition as DefinitionORM
from lexiflow.models import UserWord as UserWordORM
from lexiflow.models import Word as WordORM
from lexiflow.models import WordDetail as WordDetailORM

logger = logging.getLogger(__name__)

SORT_COLUMNS: dict[UserWordSortField, ColumnElement] = {
    UserWordSortField.CREATED_AT: UserWordORM.created_at,
    UserWordSortField.WORD: func.lower(WordORM.text),
    UserWordSortField.MASTERY_SCORE: UserWordORM.mastery_score,
    UserWordSortField.LAST_REVIEWED_AT: UserWordORM.last_reviewed_at,
    UserWordSortField.NEXT_SRS_REVIEW: UserWordORM.next_srs_review,
}


class UserWordRepository:
    """Repository for UserWord persistence (domain-centric)."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserWordMapper()

    def _query(self) -> Select[tuple[UserWordORM]]:
        return select(UserWordORM).options(
            joinedload(UserWordORM.definition)
            .joinedload(DefinitionORM.word_detail)
            .joinedload(WordDetailORM.word)
        )

    def find_by_id(
        self, user_word_id: UserWordId, user_id: UserId, include_deleted: bool = False
    ) -> UserWord | None:
        stmt = (
            self._query()
            .where(UserWordORM.id == user_word_id.value)
            .where(UserWordORM.user_id == user_id.value)
        )
        if not include_deleted:
            stmt = stmt.where(UserWordORM.deleted_at.is_(None))

        orm_model = self.db.execute(stmt).unique().scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_definition(
        self, user_id: UserId, definition_id: DefinitionId, include_deleted: bool = True
    ) -> UserWord | None:
        stmt = (
            self._query()
            .where(UserWordORM.user_id == user_id.value)
            .where(UserWordORM.definition_id == definition_id.value)
            .order_by(UserWordORM.deleted_at.is_not(None), UserWordORM.id)
        )
        if not include_deleted:
            stmt = stmt.where(UserWordORM.deleted_at.is_(None))

        orm_model = self.db.execute(stmt).unique().scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, user_word_ids: list[UserWordId], user_id: UserId) -> list[UserWord]:
        """Active entries among ``user_word_ids``, in the given order."""
        if not user_word_ids:
            return []

        ids = [user_word_id.value for user_word_id in user_word_ids]
        stmt = (
            self._query()
            .where(UserWordORM.id.in_(ids))
            .where(UserWordORM.user_id == user_id.value)
            .where(UserWordORM.deleted_at.is_(None))
        )
        by_id = {orm.id: orm for orm in self.db.execute(stmt).unique().scalars().all()}
        return [self.mapper.to_domain(by_id[i]) for i in ids if i in by_id]

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
        conditions: list[ColumnElement[bool]] = [
            UserWordORM.user_id == user_id.value,
            UserWordORM.deleted_at.is_(None),
        ]
        if filters.learning_statuses:
            conditions.append(
                UserWordORM.learning_status.in_([s.value for s in filters.learning_statuses])
            )
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            conditions.append(
                or_(
                    WordORM.text.ilike(pattern),
                    DefinitionORM.text.ilike(pattern),
                    UserWordORM.custom_definition.ilike(pattern),
                )
            )
        if filters.part_of_speech:
            conditions.append(WordDetailORM.part_of_speech == filters.part_of_speech.value)
        if filters.is_favorite is not None:
            conditions.append(UserWordORM.is_favorite.is_(filters.is_favorite))
        if filters.is_modified is not None:
            conditions.append(UserWordORM.is_modified.is_(filters.is_modified))
        if filters.needs_review:
            conditions.append(
                or_(
                    UserWordORM.learning_status == LearningStatus.NEEDS_REVIEW.value,
                    UserWordORM.next_review_due <= now,
                )
            )

        def with_catalogue_joins(stmt: Select) -> Select:
            return (
                stmt.join(DefinitionORM, DefinitionORM.id == UserWordORM.definition_id)
                .join(WordDetailORM, WordDetailORM.id == DefinitionORM.word_detail_id)
                .join(WordORM, WordORM.id == WordDetailORM.word_id)
                .where(*conditions)
            )

        total = (
            self.db.execute(
                with_catalogue_joins(select(func.count(UserWordORM.id)).select_from(UserWordORM))
            ).scalar()
            or 0
        )

        sort_column = SORT_COLUMNS[filters.sort_by]
        ordering = sort_column.asc() if filters.sort_order == SortOrder.ASC else sort_column.desc()
        stmt = (
            with_catalogue_joins(self._query())
            .order_by(ordering.nulls_last(), UserWordORM.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).unique().scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def find_active(
        self, user_id: UserId, user_word_ids: list[UserWordId] | None = None
    ) -> list[UserWord]:
        stmt = (
            self._query()
            .where(UserWordORM.user_id == user_id.value)
            .where(UserWordORM.deleted_at.is_(None))
            .order_by(UserWordORM.created_at, UserWordORM.id)
        )
        if user_word_ids is not None:
            stmt = stmt.where(UserWordORM.id.in_([i.value for i in user_word_ids]))

        orm_models = self.db.execute(stmt).unique().scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, user_word: UserWord) -> UserWord:
        """
        Persist an entry.

        If the entry has a placeholder ID (0), creates a new record.
        Otherwise updates the existing record.
        """
        if user_word.id.value == 0:
            orm_model = self.mapper.to_orm(user_word)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(
                f"Added definition {orm_model.definition_id} to dictionary of user "
                f"{orm_model.user_id} (id={orm_model.id})"
            )
            return self.mapper.to_domain(orm_model)

        existing = self.db.get(UserWordORM, user_word.id.value)
        if not existing:
            raise ValueError(f"User word with id {user_word.id.value} not found")

        self.mapper.to_orm(user_word, existing)
        self.db.commit()
        self.db.refresh(existing)
        return self.mapper.to_domain(existing)
