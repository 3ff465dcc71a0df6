"""Entities and their typed identifiers."""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Integer identity of a persisted entity.

    Each aggregate gets its own subclass, so a ``WordId`` cannot be passed
    where a ``UserWordId`` is expected. Zero marks an entity the database
    has not numbered yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        return cls(0)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Equal to another entity of the same class with the same id."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
