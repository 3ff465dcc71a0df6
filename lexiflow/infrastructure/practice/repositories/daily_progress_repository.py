from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.practice.entities.daily_progress import DailyProgress
from lexiflow.infrastructure.practice.mappers.daily_progress_mapper import DailyProgressMapper
from lexiflow.models import DailyProgress as DailyProgressORM


class DailyProgressRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DailyProgressMapper()

    def find_by_date(self, user_id: UserId, day: date) -> DailyProgress | None:
        stmt = (
            select(DailyProgressORM)
            .where(DailyProgressORM.user_id == user_id.value)
            .where(DailyProgressORM.day == day)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_range(self, user_id: UserId, start: date, end: date) -> list[DailyProgress]:
        """Rows between ``start`` and ``end`` inclusive, oldest first."""
        stmt = (
            select(DailyProgressORM)
            .where(DailyProgressORM.user_id == user_id.value)
            .where(DailyProgressORM.day >= start)
            .where(DailyProgressORM.day <= end)
            .order_by(DailyProgressORM.day)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save(self, progress: DailyProgress) -> DailyProgress:
        orm_model = (
            self.db.get(DailyProgressORM, progress.id.value) if progress.id.value != 0 else None
        )
        orm_model = self.mapper.to_orm(progress, orm_model)
        if progress.id.value == 0:
            self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
