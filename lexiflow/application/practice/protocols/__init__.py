from .daily_progress_repository import DailyProgressRepositoryProtocol
from .learning_mistake_repository import LearningMistakeRepositoryProtocol
from .learning_session_repository import LearningSessionRepositoryProtocol

__all__ = [
    "DailyProgressRepositoryProtocol",
    "LearningMistakeRepositoryProtocol",
    "LearningSessionRepositoryProtocol",
]
