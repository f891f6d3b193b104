"""Unit tests for domain events and their registry."""

from dataclasses import FrozenInstanceError, dataclass
from datetime import UTC, datetime

import pytest

from tessera.domain.errors import InvalidEventPayloadError, UnknownEventTypeError
from tessera.domain.events import DomainEvent, create_event_registry, deserialize_event
from tessera.value_graph import FrozenValueError

# pylint: disable=magic-value-comparison


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(DomainEvent):
    """A fake event with a structured payload."""

    lines: list[dict[str, int]]
    note: str = ""


@dataclass(frozen=True, kw_only=True)
class OrderCancelled(DomainEvent):
    """A fake event with no payload."""


REGISTRY = create_event_registry([OrderPlaced, OrderCancelled])


class TestDomainEvent:
    """Tests for DomainEvent."""

    @staticmethod
    def test_envelope_defaults() -> None:
        """Events get an id and a UTC timestamp."""
        event = OrderCancelled(aggregate_id="order-1")
        assert len(event.event_id) == 36
        assert event.occurred_on.tzinfo is UTC
        assert event.event_name == "OrderCancelled"
        assert event.payload == {}

    @staticmethod
    def test_payload_is_deep_frozen_copy() -> None:
        """The payload is detached from the caller and immutable."""
        lines = [{"sku": 1}]
        event = OrderPlaced(aggregate_id="order-1", lines=lines)
        lines.append({"sku": 2})
        assert event.lines == [{"sku": 1}]
        with pytest.raises(FrozenValueError):
            event.lines.append({"sku": 3})
        with pytest.raises(FrozenValueError):
            event.lines[0]["sku"] = 9
        assert event.lines == [{"sku": 1}]

    @staticmethod
    def test_fields_cannot_be_reassigned() -> None:
        """Events are frozen dataclasses."""
        event = OrderCancelled(aggregate_id="order-1")
        with pytest.raises(FrozenInstanceError):
            event.aggregate_id = "other"  # type: ignore[misc]

    @staticmethod
    def test_to_dict() -> None:
        """to_dict writes the envelope and a mutable payload."""
        moment = datetime(2024, 1, 1, tzinfo=UTC)
        event = OrderPlaced(aggregate_id="order-1", event_id="e-1", occurred_on=moment, lines=[{"sku": 1}])
        data = event.to_dict()
        assert data == {
            "event_id": "e-1",
            "event_name": "OrderPlaced",
            "event_type": "OrderPlaced",
            "occurred_on": "2024-01-01T00:00:00+00:00",
            "aggregate_id": "order-1",
            "payload": {"lines": [{"sku": 1}], "note": ""},
        }
        data["payload"]["lines"].append({"sku": 2})
        assert len(event.lines) == 1


class TestRegistry:
    """Tests for create_event_registry and deserialize_event."""

    @staticmethod
    def test_registry_keys_are_class_names() -> None:
        """Event types are registered under their names."""
        assert REGISTRY == {"OrderPlaced": OrderPlaced, "OrderCancelled": OrderCancelled}

    @staticmethod
    def test_round_trip_preserves_envelope() -> None:
        """Deserializing restores the original id and timestamp."""
        event = OrderPlaced(aggregate_id="order-1", lines=[{"sku": 1}], note="rush")
        restored = deserialize_event(event.to_dict(), REGISTRY)
        assert isinstance(restored, OrderPlaced)
        assert restored.event_id == event.event_id
        assert restored.occurred_on == event.occurred_on
        assert restored.note == "rush"
        assert restored.lines == [{"sku": 1}]

    @staticmethod
    def test_missing_event_type() -> None:
        """event_type is required."""
        with pytest.raises(InvalidEventPayloadError, match="missing event_type"):
            deserialize_event({"aggregate_id": "order-1"}, REGISTRY)

    @staticmethod
    def test_missing_aggregate_id() -> None:
        """aggregate_id is required."""
        with pytest.raises(InvalidEventPayloadError, match="missing aggregate_id"):
            deserialize_event({"event_type": "OrderCancelled"}, REGISTRY)

    @staticmethod
    def test_unknown_event_type() -> None:
        """Unknown types list what is available."""
        with pytest.raises(UnknownEventTypeError, match="Available types: OrderPlaced, OrderCancelled"):
            deserialize_event({"event_type": "Nope", "aggregate_id": "x"}, REGISTRY)

    @staticmethod
    def test_malformed_occurred_on() -> None:
        """A timestamp that is not ISO 8601 is reported as an invalid payload."""
        data = {"event_type": "OrderCancelled", "aggregate_id": "x", "occurred_on": "yesterday"}
        with pytest.raises(InvalidEventPayloadError, match="occurred_on"):
            deserialize_event(data, REGISTRY)

    @staticmethod
    def test_payload_not_matching_event_type() -> None:
        """Unexpected payload fields are reported as an invalid payload."""
        with pytest.raises(InvalidEventPayloadError, match="OrderCancelled"):
            deserialize_event(
                {"event_type": "OrderCancelled", "aggregate_id": "x", "payload": {"bogus": 1}},
                REGISTRY,
            )
