"""
Mapper for converting between LearningSession ORM models and domain entities.

Items are append-only: only items that have not been persisted yet (id 0)
are turned into new ORM rows on update.
"""

from lexiflow.domain.common.value_objects.ids import (
    LearningSessionId,
    SessionItemId,
    UserId,
    UserListId,
    UserWordId,
    WordListId,
)
from lexiflow.domain.practice.entities.learning_session import LearningSession, SessionItem
from lexiflow.domain.practice.value_objects import ExerciseType, SessionType
from lexiflow.models import LearningSession as LearningSessionORM
from lexiflow.models import SessionItem as SessionItemORM
from lexiflow.utils import ensure_utc


class LearningSessionMapper:
    """Mapper for LearningSession ORM ↔ Domain conversion."""

    def item_to_domain(self, orm_model: SessionItemORM) -> SessionItem:
        return SessionItem(
            id=SessionItemId(orm_model.id),
            user_word_id=UserWordId(orm_model.user_word_id),
            is_correct=orm_model.is_correct,
            response_time=orm_model.response_time,
            attempts_count=orm_model.attempts_count,
            exercise_type=ExerciseType(orm_model.exercise_type) if orm_model.exercise_type else None,
            accuracy=orm_model.accuracy,
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_domain(self, orm_model: LearningSessionORM) -> LearningSession:
        start_time = ensure_utc(orm_model.start_time)
        assert start_time is not None
        return LearningSession(
            id=LearningSessionId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            session_type=SessionType(orm_model.session_type),
            start_time=start_time,
            end_time=ensure_utc(orm_model.end_time),
            duration=orm_model.duration,
            user_list_id=UserListId(orm_model.user_list_id) if orm_model.user_list_id else None,
            list_id=WordListId(orm_model.list_id) if orm_model.list_id else None,
            target_words=orm_model.target_words,
            words_studied=orm_model.words_studied,
            words_learned=orm_model.words_learned,
            correct_answers=orm_model.correct_answers,
            incorrect_answers=orm_model.incorrect_answers,
            score=orm_model.score,
            completion_percentage=orm_model.completion_percentage,
            difficulty_score=orm_model.difficulty_score,
            paused_at=ensure_utc(orm_model.paused_at),
            paused_seconds=orm_model.paused_seconds or 0,
            items=[self.item_to_domain(item) for item in orm_model.items],
        )

    def _item_to_orm(self, item: SessionItem) -> SessionItemORM:
        orm_item = SessionItemORM(
            user_word_id=item.user_word_id.value,
            is_correct=item.is_correct,
            response_time=item.response_time,
            attempts_count=item.attempts_count,
            exercise_type=item.exercise_type.value if item.exercise_type else None,
            accuracy=item.accuracy,
        )
        if item.created_at is not None:
            orm_item.created_at = item.created_at
        return orm_item

    def to_orm(
        self, domain_entity: LearningSession, orm_model: LearningSessionORM | None = None
    ) -> LearningSessionORM:
        if orm_model is None:
            orm_model = LearningSessionORM(
                id=domain_entity.id.value if domain_entity.id.value != 0 else None,
                user_id=domain_entity.user_id.value,
            )

        orm_model.session_type = domain_entity.session_type.value
        orm_model.start_time = domain_entity.start_time
        orm_model.end_time = domain_entity.end_time
        orm_model.duration = domain_entity.duration
        orm_model.user_list_id = (
            domain_entity.user_list_id.value if domain_entity.user_list_id else None
        )
        orm_model.list_id = domain_entity.list_id.value if domain_entity.list_id else None
        orm_model.target_words = domain_entity.target_words
        orm_model.words_studied = domain_entity.words_studied
        orm_model.words_learned = domain_entity.words_learned
        orm_model.correct_answers = domain_entity.correct_answers
        orm_model.incorrect_answers = domain_entity.incorrect_answers
        orm_model.score = domain_entity.score
        orm_model.completion_percentage = domain_entity.completion_percentage
        orm_model.difficulty_score = domain_entity.difficulty_score
        orm_model.paused_at = domain_entity.paused_at
        orm_model.paused_seconds = domain_entity.paused_seconds

        for item in domain_entity.items:
            if item.id.value == 0:
                orm_model.items.append(self._item_to_orm(item))
        return orm_model
