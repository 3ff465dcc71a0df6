from datetime import date
from typing import Protocol

from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.practice.entities.daily_progress import DailyProgress


class DailyProgressRepositoryProtocol(Protocol):
    def find_by_date(self, user_id: UserId, day: date) -> DailyProgress | None: ...

    def find_range(self, user_id: UserId, start: date, end: date) -> list[DailyProgress]:
        """Rows between ``start`` and ``end`` inclusive, oldest first."""
        ...

    def save(self, progress: DailyProgress) -> DailyProgress: ...
