"""Fluent builders that collect properties before creating a value object."""

from __future__ import annotations

import abc
import copy
from collections.abc import Callable, Mapping
from typing import Any, Generic, Self, TypeVar

from tessera.domain.result import Result
from tessera.domain.value_object import ValueObject

T = TypeVar("T", bound=ValueObject)
R = TypeVar("R")

Validator = Callable[[Mapping[str, Any]], list[str]]
Factory = Callable[[Mapping[str, Any]], T]


class ValueObjectBuilder(abc.ABC, Generic[T]):
    """Accumulates properties step by step and builds a value object at the end.

    Unlike the value object itself, the builder is mutable: every setter
    changes the builder in place and returns it for chaining.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._props: dict[str, Any] = dict(initial or {})

    @abc.abstractmethod
    def validate(self) -> list[str]:
        """Return a list of problems with the current properties (empty if valid)."""

    @abc.abstractmethod
    def create(self) -> T:
        """Construct the value object from the current properties."""

    # --- Property management ---

    def update(self, props: Mapping[str, Any]) -> Self:
        """Copy every entry of ``props`` into the builder (shallow)."""
        self._props.update(props)
        return self

    def set(self, name: str, value: Any) -> Self:
        """Set one property."""
        self._props[name] = value
        return self

    def get(self, name: str, default: Any = None) -> Any:
        """Return one property, or ``default`` if it is not set."""
        return self._props.get(name, default)

    def has(self, name: str) -> bool:
        """Return True if ``name`` is set to something other than None."""
        return self._props.get(name) is not None

    def clear(self, name: str) -> Self:
        """Remove one property if present."""
        self._props.pop(name, None)
        return self

    def clear_all(self) -> Self:
        """Remove all properties."""
        self._props = {}
        return self

    @property
    def props(self) -> dict[str, Any]:
        """A shallow copy of the collected properties."""
        return dict(self._props)

    # --- Building ---

    def build(self) -> Result[T, list[str]]:
        """Validate and create the value object.

        Returns:
            A success holding the value object, or a failure holding either
            the validation problems or the construction error message.
        """
        if errors := self.validate():
            return Result.fail(errors)
        try:
            return Result.ok(self.create())
        except (ValueError, TypeError) as exc:
            return Result.fail([str(exc) or "Unknown error"])

    def try_build(self) -> Result[T, str]:
        """Like `build`, with the problems joined into one message."""
        return self.build().map_error("; ".join)

    def is_valid(self) -> bool:
        """Return True if the current properties pass validation."""
        return not self.validate()

    def errors(self) -> list[str]:
        """Return the current validation problems."""
        return self.validate()

    # --- Composition ---

    def copy(self) -> Self:
        """Return an independent builder with the same properties."""
        duplicate = copy.copy(self)
        duplicate._props = dict(self._props)  # pylint: disable=protected-access
        return duplicate

    def when(self, condition: bool, fn: Callable[[Self], object]) -> Self:
        """Apply ``fn`` to the builder only if ``condition`` holds."""
        if condition:
            fn(self)
        return self

    def pipe(self, fn: Callable[[Self], R]) -> R:
        """Pass the builder to ``fn`` and return its result."""
        return fn(self)

    def apply(self, *setters: Callable[[Self], object]) -> Self:
        """Apply each setter to the builder in order."""
        for setter in setters:
            setter(self)
        return self


class GenericValueObjectBuilder(ValueObjectBuilder[T]):
    """A builder configured with a factory and a validator instead of subclassing."""

    def __init__(
        self,
        factory: Factory[T],
        validator: Validator,
        initial: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(initial)
        self._factory = factory
        self._validator = validator

    @classmethod
    def of(
        cls,
        factory: Factory[T],
        validator: Validator,
        initial: Mapping[str, Any] | None = None,
    ) -> GenericValueObjectBuilder[T]:
        """Alternative constructor mirroring the keyword-free call style."""
        return cls(factory, validator, initial)

    def validate(self) -> list[str]:
        return self._validator(self.props)

    def create(self) -> T:
        return self._factory(self.props)
