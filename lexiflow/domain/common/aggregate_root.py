"""Aggregate roots: the only entry point into a cluster of domain objects."""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Entity that guards the invariants of everything it owns.

    Events recorded by its methods wait on the instance until the use case
    that saved it collects them.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Hand over the recorded events, leaving none behind."""
        events, self._events = self._events, []
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        return list(self._events)
