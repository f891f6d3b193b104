"""Unit tests for domain errors."""

from tessera.domain import errors


class TestValueObjectValidationError:
    """Tests for the ValueObjectValidationError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The error carries the value object name and the reason."""
        error = errors.ValueObjectValidationError("Money", "amount must be >= 0")
        assert error.value_object_name == "Money"
        assert error.reason == "amount must be >= 0"
        assert str(error) == "amount must be >= 0"

    @staticmethod
    def test_is_a_value_error() -> None:
        """Validation failures can be caught as ValueError."""
        assert isinstance(errors.ValueObjectValidationError("X", "bad"), ValueError)
        assert isinstance(errors.ValueObjectValidationError("X", "bad"), errors.DomainError)


class TestIdentifierErrors:
    """Tests for the identifier errors."""

    @staticmethod
    def test_already_set_message() -> None:
        """The message names the identifier."""
        error = errors.IdentifierAlreadySetError("Business ID")
        assert error.label == "Business ID"
        assert str(error) == "Business ID has already been set"

    @staticmethod
    def test_invalid_identifier_message() -> None:
        """The message names the identifier and is a ValueError."""
        error = errors.InvalidIdentifierError("Secondary business ID")
        assert str(error) == "Secondary business ID cannot be None"
        assert isinstance(error, ValueError)


class TestEventErrors:
    """Tests for the domain event errors."""

    @staticmethod
    def test_invalid_payload_message() -> None:
        """The reason is prefixed."""
        error = errors.InvalidEventPayloadError("missing event_type field")
        assert error.reason == "missing event_type field"
        assert str(error) == "Invalid event payload: missing event_type field"

    @staticmethod
    def test_unknown_event_type_lists_available_types() -> None:
        """Known types are listed in the message."""
        error = errors.UnknownEventTypeError("Nope", ["Created", "Renamed"])
        assert error.event_type == "Nope"
        assert error.available_types == ("Created", "Renamed")
        assert str(error) == "Unknown event type: Nope. Available types: Created, Renamed"

    @staticmethod
    def test_unknown_event_type_with_empty_registry() -> None:
        """An empty registry is reported as 'none'."""
        error = errors.UnknownEventTypeError("Nope", [])
        assert str(error) == "Unknown event type: Nope. Available types: none"
