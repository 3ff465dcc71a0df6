from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserId must be non-negative")


@dataclass(frozen=True)
class WordId(EntityId):
    """Strongly-typed word identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("WordId must be non-negative")


@dataclass(frozen=True)
class WordDetailId(EntityId):
    """Strongly-typed word detail identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("WordDetailId must be non-negative")


@dataclass(frozen=True)
class DefinitionId(EntityId):
    """Strongly-typed definition identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("DefinitionId must be non-negative")


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("CategoryId must be non-negative")


@dataclass(frozen=True)
class WordListId(EntityId):
    """Strongly-typed word list identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("WordListId must be non-negative")


@dataclass(frozen=True)
class UserWordId(EntityId):
    """Strongly-typed user dictionary entry identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserWordId must be non-negative")


@dataclass(frozen=True)
class UserListId(EntityId):
    """Strongly-typed user list identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserListId must be non-negative")


@dataclass(frozen=True)
class LearningSessionId(EntityId):
    """Strongly-typed learning session identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("LearningSessionId must be non-negative")


@dataclass(frozen=True)
class SessionItemId(EntityId):
    """Strongly-typed session item identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("SessionItemId must be non-negative")


@dataclass(frozen=True)
class LearningMistakeId(EntityId):
    """Strongly-typed learning mistake identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("LearningMistakeId must be non-negative")


@dataclass(frozen=True)
class DailyProgressId(EntityId):
    """Strongly-typed daily progress identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("DailyProgressId must be non-negative")
