"""Domain-layer error definitions."""

from collections.abc import Iterable

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ResultAccessError(DomainError):
    """Raised when reading the value of a failure or the error of a success."""


# ============================================================================
#                           Value object errors
# ============================================================================


class ValueObjectValidationError(DomainError, ValueError):
    """Raised when a value object is constructed from invalid properties."""

    def __init__(self, value_object_name: str, reason: str) -> None:
        super().__init__(reason)
        self.value_object_name = value_object_name
        self.reason = reason


# ============================================================================
#                           Identity errors
# ============================================================================


class IdentifierAlreadySetError(DomainError):
    """Raised when a write-once business identifier is assigned twice."""

    def __init__(self, label: str) -> None:
        super().__init__(f"{label} has already been set")
        self.label = label


class InvalidIdentifierError(DomainError, ValueError):
    """Raised when a business identifier is assigned an empty value."""

    def __init__(self, label: str) -> None:
        super().__init__(f"{label} cannot be None")
        self.label = label


# ============================================================================
#                           Domain event errors
# ============================================================================


class InvalidEventPayloadError(DomainError):
    """Raised when a serialized event is missing required fields."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid event payload: {reason}")
        self.reason = reason


class UnknownEventTypeError(DomainError):
    """Raised when a serialized event names a type missing from the registry."""

    def __init__(self, event_type: str, available_types: Iterable[str]) -> None:
        self.event_type = event_type
        self.available_types = tuple(available_types)
        super().__init__(
            f"Unknown event type: {event_type}. "
            f"Available types: {', '.join(self.available_types) or 'none'}"
        )
