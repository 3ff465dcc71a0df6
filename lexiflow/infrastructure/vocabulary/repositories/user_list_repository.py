"""Domain-centric repository for the user's list collection."""

import logging

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session, selectinload

from lexiflow.application.vocabulary.dtos import SortOrder, UserListFilters, UserListSortField
from lexiflow.domain.common.value_objects.ids import UserId, UserListId, WordListId
from lexiflow.domain.vocabulary.entities.user_list import UserList
from lexiflow.infrastructure.vocabulary.mappers.user_list_mapper import UserListMapper
from lexiflow.models import UserList as UserListORM
from lexiflow.models import UserListWord as UserListWordORM
from lexiflow.models import WordList as WordListORM

logger = logging.getLogger(__name__)


class UserListRepository:
    """Repository for UserList persistence (domain-centric)."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserListMapper()

    def find_by_id(self, user_list_id: UserListId, user_id: UserId) -> UserList | None:
        stmt = (
            select(UserListORM)
            .options(selectinload(UserListORM.entries))
            .where(UserListORM.id == user_list_id.value)
            .where(UserListORM.user_id == user_id.value)
            .where(UserListORM.deleted_at.is_(None))
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_list_id(self, user_id: UserId, list_id: WordListId) -> UserList | None:
        stmt = (
            select(UserListORM)
            .options(selectinload(UserListORM.entries))
            .where(UserListORM.user_id == user_id.value)
            .where(UserListORM.list_id == list_id.value)
            .order_by(UserListORM.deleted_at.is_not(None), UserListORM.id)
        )
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_filtered(self, user_id: UserId, filters: UserListFilters) -> list[UserList]:
        """
        Active entries matching the filters.

        Name, difficulty and language fall back to the adopted word list when
        the entry has no custom value.
        """
        name = func.coalesce(UserListORM.custom_name, WordListORM.name)
        difficulty = func.coalesce(UserListORM.custom_difficulty, WordListORM.difficulty_level)
        word_count = (
            select(func.count(UserListWordORM.user_word_id))
            .where(UserListWordORM.user_list_id == UserListORM.id)
            .correlate(UserListORM)
            .scalar_subquery()
        )

        conditions: list[ColumnElement[bool]] = [
            UserListORM.user_id == user_id.value,
            UserListORM.deleted_at.is_(None),
        ]
        if filters.search:
            conditions.append(name.ilike(f"%{filters.search.strip()}%"))
        if filters.difficulty:
            conditions.append(difficulty == filters.difficulty.value)
        if filters.target_language_code:
            conditions.append(
                UserListORM.target_language_code == filters.target_language_code.value
            )
        if filters.custom_only:
            conditions.append(UserListORM.list_id.is_(None))

        sort_columns: dict[UserListSortField, ColumnElement] = {
            UserListSortField.NAME: func.lower(name),
            UserListSortField.CREATED_AT: UserListORM.created_at,
            UserListSortField.PROGRESS: UserListORM.progress,
            UserListSortField.WORD_COUNT: word_count,
        }
        sort_column = sort_columns[filters.sort_by]
        ordering = sort_column.asc() if filters.sort_order == SortOrder.ASC else sort_column.desc()

        stmt = (
            select(UserListORM)
            .options(selectinload(UserListORM.entries))
            .outerjoin(WordListORM, WordListORM.id == UserListORM.list_id)
            .where(*conditions)
            .order_by(ordering, UserListORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, user_list: UserList) -> UserList:
        if user_list.id.value == 0:
            orm_model = self.mapper.to_orm(user_list)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created user list {orm_model.id} for user {orm_model.user_id}")
            return self.mapper.to_domain(orm_model)

        existing = self.db.get(UserListORM, user_list.id.value)
        if not existing:
            raise ValueError(f"User list with id {user_list.id.value} not found")

        self.mapper.to_orm(user_list, existing)
        self.db.commit()
        self.db.refresh(existing)
        return self.mapper.to_domain(existing)
