import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from lexiflow.domain.common.value_objects.ids import UserId, UserWordId
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.infrastructure.practice.mappers.learning_mistake_mapper import LearningMistakeMapper
from lexiflow.models import LearningMistake as LearningMistakeORM

logger = logging.getLogger(__name__)


class LearningMistakeRepository:
    """Append-only log of wrong answers."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LearningMistakeMapper()

    def find_by_user_word(self, user_word_id: UserWordId, user_id: UserId) -> list[LearningMistake]:
        stmt = (
            select(LearningMistakeORM)
            .where(LearningMistakeORM.user_word_id == user_word_id.value)
            .where(LearningMistakeORM.user_id == user_id.value)
            .order_by(LearningMistakeORM.created_at, LearningMistakeORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_user(self, user_id: UserId, since: datetime | None = None) -> list[LearningMistake]:
        stmt = select(LearningMistakeORM).where(LearningMistakeORM.user_id == user_id.value)
        if since is not None:
            stmt = stmt.where(LearningMistakeORM.created_at >= since)
        stmt = stmt.order_by(LearningMistakeORM.created_at.desc(), LearningMistakeORM.id.desc())
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save(self, mistake: LearningMistake) -> LearningMistake:
        orm_model = self.mapper.to_orm(mistake)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.debug(
            f"Logged {orm_model.mistake_type} mistake for user word {orm_model.user_word_id}"
        )
        return self.mapper.to_domain(orm_model)
