"""Daily study totals."""

from dataclasses import dataclass
from datetime import date

from lexiflow.domain.common.entity import Entity
from lexiflow.domain.common.value_objects.ids import DailyProgressId, UserId
from lexiflow.utils import round_half_up


@dataclass
class DailyProgress(Entity[DailyProgressId]):
    """Per-day study totals for a user; one row per (user, date)."""

    id: DailyProgressId
    user_id: UserId
    date: date
    minutes_studied: int = 0
    words_learned: int = 0
    words_reviewed: int = 0
    sessions_completed: int = 0

    def record_answer(self, response_time_ms: int, is_correct: bool) -> None:
        self.minutes_studied += round_half_up(response_time_ms / 60000)
        self.words_reviewed += 1
        if is_correct:
            self.words_learned += 1

    def record_session(self) -> None:
        self.sessions_completed += 1

    @classmethod
    def start_day(cls, user_id: UserId, day: date) -> "DailyProgress":
        return cls(id=DailyProgressId.generate(), user_id=user_id, date=day)
