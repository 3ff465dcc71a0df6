"""Domain events, recorded by aggregates and read after a save."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class DomainEvent:
    """Something that already happened to an aggregate. Name subclasses in the past tense."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def name(self) -> str:
        return type(self).__name__
