from lexiflow.domain.common.value_objects.ids import DailyProgressId, UserId
from lexiflow.domain.practice.entities.daily_progress import DailyProgress
from lexiflow.models import DailyProgress as DailyProgressORM


class DailyProgressMapper:
    def to_domain(self, orm_model: DailyProgressORM) -> DailyProgress:
        return DailyProgress(
            id=DailyProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            date=orm_model.day,
            minutes_studied=orm_model.minutes_studied,
            words_learned=orm_model.words_learned,
            words_reviewed=orm_model.words_reviewed,
            sessions_completed=orm_model.sessions_completed,
        )

    def to_orm(
        self, domain_entity: DailyProgress, orm_model: DailyProgressORM | None = None
    ) -> DailyProgressORM:
        if orm_model is None:
            orm_model = DailyProgressORM(
                id=domain_entity.id.value if domain_entity.id.value != 0 else None,
                user_id=domain_entity.user_id.value,
                day=domain_entity.date,
            )

        orm_model.minutes_studied = domain_entity.minutes_studied
        orm_model.words_learned = domain_entity.words_learned
        orm_model.words_reviewed = domain_entity.words_reviewed
        orm_model.sessions_completed = domain_entity.sessions_completed
        return orm_model
