"""Base class for all aggregate roots."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from tessera.domain.entity import Entity
from tessera.domain.entity_id import EntityId
from tessera.domain.events import DomainEvent

B = TypeVar("B", str, int)


class AggregateRoot(Entity[B]):
    """An entity that guards a consistency boundary and records domain events.

    Concrete aggregates call `_record` from their command methods; the
    application layer collects the events with `dequeue_uncommitted` after
    persisting the aggregate and publishes them.
    """

    def __init__(
        self, props: Mapping[str, Any], entity_id: EntityId[B] | None = None
    ) -> None:
        self._pending_events: list[DomainEvent] = []
        super().__init__(props, entity_id)

    # --- Plumbing ---

    def _record(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """The events recorded since the last dequeue, oldest first."""
        return tuple(self._pending_events)

    @property
    def has_domain_events(self) -> bool:
        """True if any events are pending."""
        return bool(self._pending_events)

    @property
    def domain_event_count(self) -> int:
        """The number of pending events."""
        return len(self._pending_events)

    def clear_domain_events(self) -> None:
        """Drop all pending events."""
        self._pending_events = []

    def dequeue_uncommitted(self) -> list[DomainEvent]:
        """Dequeue all uncommitted events.

        Returns:
            A list of all events recorded since the last call to this method.

        Note: This is NOT thread-safe. It is the caller's responsibility to ensure
        that no other operations are performed on the aggregate between calls to this
        method.
        """

        uncommitted_events = self._pending_events
        self._pending_events = []
        return uncommitted_events
