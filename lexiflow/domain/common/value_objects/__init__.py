"""Common value objects shared across all domain modules."""

from .ids import (
    CategoryId,
    DailyProgressId,
    DefinitionId,
    LearningMistakeId,
    LearningSessionId,
    SessionItemId,
    UserId,
    UserListId,
    UserWordId,
    WordDetailId,
    WordId,
    WordListId,
)

__all__ = [
    "CategoryId",
    "DailyProgressId",
    "DefinitionId",
    "LearningMistakeId",
    "LearningSessionId",
    "SessionItemId",
    "UserId",
    "UserListId",
    "UserWordId",
    "WordDetailId",
    "WordId",
    "WordListId",
]
