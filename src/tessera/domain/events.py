"""Domain events and their (de)serialization through a type registry."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from typing import Any

from tessera.domain.errors import InvalidEventPayloadError, UnknownEventTypeError
from tessera.value_graph import clone, freeze

logger = logging.getLogger(__name__)

# Fields every event carries; everything else a subclass declares is payload.
ENVELOPE_FIELDS = frozenset({"aggregate_id", "event_id", "occurred_on"})


def _new_event_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events.

    Subclasses declare their payload as additional dataclass fields and must
    be decorated with ``@dataclass(frozen=True, kw_only=True)``. Payload
    values are deep-frozen on construction, so a list or dict passed in can
    no longer be changed through the event.

    Example:
        ```py
        @dataclass(frozen=True, kw_only=True)
        class OrderPlaced(DomainEvent):
            lines: list[dict[str, int]]

        event = OrderPlaced(aggregate_id="order-1", lines=[{"sku": 1}])
        ```
    """

    aggregate_id: str
    event_id: str = field(default_factory=_new_event_id)
    occurred_on: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        for name, value in self.payload.items():
            object.__setattr__(self, name, freeze(clone(value)))

    @property
    def event_name(self) -> str:
        """The event's name, which is also its registry key."""
        return type(self).__name__

    @property
    def payload(self) -> dict[str, Any]:
        """The subclass-declared fields and their values."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ENVELOPE_FIELDS
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict that `deserialize_event` accepts.

        The payload is returned as mutable copies of the frozen values.
        """
        return {
            "event_id": self.event_id,
            "event_name": self.event_name,
            "event_type": self.event_name,
            "occurred_on": self.occurred_on.isoformat(),
            "aggregate_id": self.aggregate_id,
            "payload": clone(self.payload),
        }


EventRegistry = Mapping[str, type[DomainEvent]]


def create_event_registry(event_types: Iterable[type[DomainEvent]]) -> dict[str, type[DomainEvent]]:
    """Build a registry mapping each event type's name to the type."""
    return {event_type.__name__: event_type for event_type in event_types}


def deserialize_event(data: Mapping[str, Any], registry: EventRegistry) -> DomainEvent:
    """Rebuild a domain event from the output of `DomainEvent.to_dict`.

    The original ``event_id`` and ``occurred_on`` are restored rather than
    generated anew.

    Args:
        data: The serialized event.
        registry: Known event types keyed by name.

    Returns:
        The reconstructed event.

    Raises:
        InvalidEventPayloadError: If ``event_type`` or ``aggregate_id`` is
            missing, ``occurred_on`` is not an ISO 8601 string, or the
            payload does not fit the event type.
        UnknownEventTypeError: If ``event_type`` is not in the registry.
    """
    if not (event_type := data.get("event_type")):
        raise InvalidEventPayloadError("missing event_type field")
    if (event_cls := registry.get(event_type)) is None:
        raise UnknownEventTypeError(event_type, registry.keys())
    if "aggregate_id" not in data:
        raise InvalidEventPayloadError("missing aggregate_id field")

    envelope: dict[str, Any] = {"aggregate_id": data["aggregate_id"]}
    if event_id := data.get("event_id"):
        envelope["event_id"] = event_id
    if occurred_on := data.get("occurred_on"):
        if isinstance(occurred_on, str):
            try:
                occurred_on = datetime.fromisoformat(occurred_on)
            except ValueError as exc:
                raise InvalidEventPayloadError(f"malformed occurred_on: {exc}") from exc
        envelope["occurred_on"] = occurred_on

    logger.debug("Deserializing %s for aggregate %s", event_type, data["aggregate_id"])
    try:
        return event_cls(**envelope, **dict(data.get("payload") or {}))
    except TypeError as exc:
        raise InvalidEventPayloadError(f"{event_type}: {exc}") from exc
