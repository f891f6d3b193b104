"""Base class for value objects: immutable, identity-less, compared by value."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping
from types import SimpleNamespace
from typing import Any, Self

from tessera.domain.result import Result
from tessera.utils.safe_stringify import safe_stringify
from tessera.value_graph import FrozenRecord, FrozenValueError, classify, clone, equals, freeze

_MISSING = object()


class ValueObject(abc.ABC):
    """Generic base class for value objects.

    Properties are passed as keyword arguments, validated, then deep-cloned
    and deep-frozen into a `FrozenRecord` that becomes the instance's only
    state. Nothing the caller still holds can change the value object
    afterwards, and nothing reachable from it can be mutated.

    Two value objects are equal when they are of exactly the same class and
    their properties are structurally equal.

    Example:
        ```py
        class Money(ValueObject):
            def validate(self, props):
                if props["amount"] < 0:
                    raise ValueObjectValidationError("Money", "amount must be >= 0")

        assert Money(amount=5, currency="EUR") == Money(amount=5, currency="EUR")
        ```
    """

    __slots__ = ("_props",)

    _props: FrozenRecord

    def __init__(self, **props: Any) -> None:
        self.validate(props)
        object.__setattr__(self, "_props", freeze(clone(SimpleNamespace(**props))))

    @abc.abstractmethod
    def validate(self, props: Mapping[str, Any]) -> None:
        """Check the properties before they are stored.

        Args:
            props: The properties the instance is being built from.

        Raises:
            ValueError: If the properties are invalid (typically
                `ValueObjectValidationError`).
        """

    # --- Construction Paths ---

    @classmethod
    def from_dict(cls, props: Mapping[str, Any]) -> Result[Self, str]:
        """Build an instance, capturing validation failures as a failed `Result`."""
        try:
            return Result.ok(cls(**props))
        except (ValueError, TypeError) as exc:
            return Result.fail(str(exc) or "Invalid value object properties")

    @classmethod
    def create_many(cls, props_list: Iterable[Mapping[str, Any]]) -> Result[list[Self], str]:
        """Build one instance per mapping, or fail with every error collected.

        Returns:
            A success holding all instances in order, or a failure whose error
            lists each failing item as ``"Item <index>: <message>"`` joined with
            ``"; "``.
        """
        instances: list[Self] = []
        errors: list[str] = []
        for index, props in enumerate(props_list):
            try:
                instances.append(cls(**props))
            except (ValueError, TypeError) as exc:
                errors.append(f"Item {index}: {exc}")
        if errors:
            return Result.fail("; ".join(errors))
        return Result.ok(instances)

    def replace(self, **changes: Any) -> Self:
        """Return a new, validated instance with some properties changed."""
        return type(self)(**{**vars(self._props), **changes})

    @staticmethod
    def is_value_object(value: object) -> bool:
        """Return True if ``value`` is a value object."""
        return isinstance(value, ValueObject)

    # --- Accessors ---

    @property
    def props(self) -> FrozenRecord:
        """The frozen properties."""
        return self._props

    def get(self, name: str, default: Any = None) -> Any:
        """Return the property ``name``, or ``default`` if it is not set."""
        return vars(self._props).get(name, default)

    def has(self, name: str, value: Any) -> bool:
        """Return True if property ``name`` is structurally equal to ``value``."""
        current = vars(self._props).get(name, _MISSING)
        return current is not _MISSING and equals(current, value)

    def is_empty(self) -> bool:
        """Return True if every property is None or the empty string."""
        return all(value is None or value == "" for value in vars(self._props).values())

    def is_valid(self) -> bool:
        """Re-run validation against the stored properties."""
        try:
            self.validate(vars(self._props))
        except ValueError:
            return False
        return True

    # --- Conversion ---

    def to_dict(self) -> dict[str, Any]:
        """Return the properties as a mutable deep copy."""
        return vars(clone(self._props))

    def to_json(self, indent: int | None = None) -> str:
        """Render the properties as JSON text."""
        return safe_stringify(self._props, indent=indent)

    def clone(self) -> Self:
        """Value objects are immutable, so the copy is the instance itself."""
        return self

    __copy__ = clone

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    # --- Plumbing ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        if other is self:
            return True
        return type(other) is type(self) and equals(self._props, other.props)

    def __hash__(self) -> int:
        # Consistent with structural equality: only str values and the
        # property names contribute exact tokens; other values hash by kind.
        tokens = tuple(
            (name, value if isinstance(value, str) else classify(value).value)
            for name, value in sorted(vars(self._props).items())
        )
        return hash((type(self).__qualname__, tokens))

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenValueError(type(self).__name__, "attribute assignment")

    def __delattr__(self, name: str) -> None:
        raise FrozenValueError(type(self).__name__, "attribute deletion")

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in vars(self._props).items())
        return f"{type(self).__name__}({fields})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (type(self), vars(clone(self._props))))


def _rebuild(cls: type[ValueObject], props: dict[str, Any]) -> ValueObject:
    return cls(**props)
