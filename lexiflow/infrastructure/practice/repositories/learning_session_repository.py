"""
Domain-centric repository for the LearningSession aggregate.

Returns domain entities instead of ORM models.
"""

import logging

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session, selectinload

from lexiflow.application.common.pagination import Pagination
from lexiflow.application.practice.dtos import SessionHistoryFilters
from lexiflow.domain.common.value_objects.ids import LearningSessionId, UserId, UserWordId
from lexiflow.domain.practice.entities.learning_session import LearningSession, SessionItem
from lexiflow.infrastructure.practice.mappers.learning_session_mapper import (
    LearningSessionMapper,
)
from lexiflow.models import LearningSession as LearningSessionORM
from lexiflow.models import SessionItem as SessionItemORM

logger = logging.getLogger(__name__)


class LearningSessionRepository:
    """Repository for LearningSession persistence (domain-centric)."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LearningSessionMapper()

    def find_by_id(self, session_id: LearningSessionId, user_id: UserId) -> LearningSession | None:
        stmt = (
            select(LearningSessionORM)
            .options(selectinload(LearningSessionORM.items))
            .where(LearningSessionORM.id == session_id.value)
            .where(LearningSessionORM.user_id == user_id.value)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_active(self, user_id: UserId) -> LearningSession | None:
        """The most recently started session that has not ended."""
        stmt = (
            select(LearningSessionORM)
            .options(selectinload(LearningSessionORM.items))
            .where(LearningSessionORM.user_id == user_id.value)
            .where(LearningSessionORM.end_time.is_(None))
            .order_by(LearningSessionORM.start_time.desc(), LearningSessionORM.id.desc())
        )
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_history(
        self, user_id: UserId, filters: SessionHistoryFilters, pagination: Pagination
    ) -> tuple[list[LearningSession], int]:
        """
        Find sessions matching the filters.

        Returns:
            Tuple of (sessions newest first, total count)
        """
        conditions: list[ColumnElement[bool]] = [LearningSessionORM.user_id == user_id.value]
        if filters.session_type:
            conditions.append(LearningSessionORM.session_type == filters.session_type.value)
        if filters.user_list_id is not None:
            conditions.append(LearningSessionORM.user_list_id == filters.user_list_id)
        if filters.list_id is not None:
            conditions.append(LearningSessionORM.list_id == filters.list_id)
        if filters.start_date:
            conditions.append(LearningSessionORM.start_time >= filters.start_date)
        if filters.end_date:
            conditions.append(LearningSessionORM.start_time <= filters.end_date)

        count_stmt = select(func.count(LearningSessionORM.id)).where(*conditions)
        total = self.db.execute(count_stmt).scalar() or 0

        stmt = (
            select(LearningSessionORM)
            .options(selectinload(LearningSessionORM.items))
            .where(*conditions)
            .order_by(LearningSessionORM.start_time.desc(), LearningSessionORM.id.desc())
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def find_all(self, user_id: UserId) -> list[LearningSession]:
        stmt = (
            select(LearningSessionORM)
            .options(selectinload(LearningSessionORM.items))
            .where(LearningSessionORM.user_id == user_id.value)
            .order_by(LearningSessionORM.start_time.desc(), LearningSessionORM.id.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_items_by_user_word(self, user_word_id: UserWordId, user_id: UserId) -> list[SessionItem]:
        """Items answered for one dictionary entry, oldest first."""
        stmt = (
            select(SessionItemORM)
            .join(LearningSessionORM, LearningSessionORM.id == SessionItemORM.session_id)
            .where(SessionItemORM.user_word_id == user_word_id.value)
            .where(LearningSessionORM.user_id == user_id.value)
            .order_by(SessionItemORM.created_at, SessionItemORM.id)
        )
        return [self.mapper.item_to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def item_statistics(self, user_id: UserId) -> dict[int, tuple[int, float]]:
        """Per entry id: (number of items, average response time in ms)."""
        stmt = (
            select(
                SessionItemORM.user_word_id,
                func.count(SessionItemORM.id),
                func.avg(SessionItemORM.response_time),
            )
            .join(LearningSessionORM, LearningSessionORM.id == SessionItemORM.session_id)
            .where(LearningSessionORM.user_id == user_id.value)
            .group_by(SessionItemORM.user_word_id)
        )
        return {
            user_word_id: (count, float(average or 0))
            for user_word_id, count, average in self.db.execute(stmt).all()
        }

    def save(self, session: LearningSession) -> LearningSession:
        """
        Persist a session and any items recorded since it was loaded.

        If the session has a placeholder ID (0), creates a new record.
        """
        if session.id.value == 0:
            orm_model = self.mapper.to_orm(session)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(
                f"Started {orm_model.session_type} session {orm_model.id} "
                f"for user {orm_model.user_id}"
            )
            return self.mapper.to_domain(orm_model)

        stmt = (
            select(LearningSessionORM)
            .options(selectinload(LearningSessionORM.items))
            .where(LearningSessionORM.id == session.id.value)
        )
        existing = self.db.execute(stmt).scalar_one_or_none()
        if not existing:
            raise ValueError(f"Learning session with id {session.id.value} not found")

        self.mapper.to_orm(session, existing)
        self.db.commit()
        self.db.refresh(existing)
        return self.mapper.to_domain(existing)
