"""Two-variant container for the outcome of an operation that may fail."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from tessera.domain.errors import ResultAccessError

# pylint: disable=broad-exception-caught

V = TypeVar("V")
E = TypeVar("E")
NV = TypeVar("NV")
NE = TypeVar("NE")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[V, E]):
    """Either a success carrying a value or a failure carrying an error.

    Build instances through `Result.ok` and `Result.fail` rather than the
    constructor.

    Example:
        ```py
        parsed = Result.from_callable(lambda: int("42"))
        doubled = parsed.map(lambda n: n * 2)
        assert doubled.value == 84
        ```
    """

    _is_success: bool
    _value: V | None = None
    _error: E | None = None

    # --- Construction ---

    @classmethod
    def ok(cls, value: V) -> Result[V, Any]:
        """Create a success holding ``value``."""
        return cls(True, value, None)

    @classmethod
    def fail(cls, error: E) -> Result[Any, E]:
        """Create a failure holding ``error``."""
        return cls(False, None, error)

    @classmethod
    def from_condition(cls, condition: bool, value: V, error: E) -> Result[V, E]:
        """Succeed with ``value`` if ``condition`` holds, otherwise fail with ``error``."""
        return cls.ok(value) if condition else cls.fail(error)

    @classmethod
    def from_optional(cls, value: V | None, error: E) -> Result[V, E]:
        """Succeed with ``value`` unless it is None."""
        return cls.ok(value) if value is not None else cls.fail(error)

    @classmethod
    def from_callable(cls, fn: Callable[[], V]) -> Result[V, Exception]:
        """Call ``fn`` and capture either its return value or the exception it raised."""
        try:
            return cls.ok(fn())
        except Exception as exc:
            return cls.fail(exc)

    @staticmethod
    def combine(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
        """Collect the values of ``results``, or return the first failure.

        Args:
            results: The results to combine, inspected in order.

        Returns:
            A success holding every value in order, or the first failure's error.
        """
        values: list[T] = []
        for result in results:
            if result.is_failure:
                return Result.fail(result.error)
            values.append(result.value)
        return Result.ok(values)

    # --- Inspection ---

    @property
    def is_success(self) -> bool:
        """True for a success."""
        return self._is_success

    @property
    def is_failure(self) -> bool:
        """True for a failure."""
        return not self._is_success

    @property
    def value(self) -> V:
        """The success value.

        Raises:
            ResultAccessError: If the result is a failure.
        """
        if not self._is_success:
            raise ResultAccessError("Cannot get the value of a failed Result")
        return cast(V, self._value)

    @property
    def error(self) -> E:
        """The failure error.

        Raises:
            ResultAccessError: If the result is a success.
        """
        if self._is_success:
            raise ResultAccessError("Cannot get the error of a successful Result")
        return cast(E, self._error)

    def value_or_none(self) -> V | None:
        """Return the value of a success, or None."""
        return self._value if self._is_success else None

    def error_or_none(self) -> E | None:
        """Return the error of a failure, or None."""
        return None if self._is_success else self._error

    def value_or(self, default: V) -> V:
        """Return the value of a success, or ``default``."""
        return cast(V, self._value) if self._is_success else default

    # --- Transformation ---

    def map(self, fn: Callable[[V], NV]) -> Result[NV, E]:
        """Apply ``fn`` to the value of a success; pass failures through."""
        if self._is_success:
            return Result.ok(fn(cast(V, self._value)))
        return Result.fail(cast(E, self._error))

    def map_error(self, fn: Callable[[E], NE]) -> Result[V, NE]:
        """Apply ``fn`` to the error of a failure; pass successes through."""
        if self._is_success:
            return Result.ok(cast(V, self._value))
        return Result.fail(fn(cast(E, self._error)))

    def chain(self, fn: Callable[[V], Result[NV, NE]]) -> Result[NV, E | NE]:
        """Continue with another fallible step if this one succeeded."""
        if self._is_success:
            return cast("Result[NV, E | NE]", fn(cast(V, self._value)))
        return Result.fail(cast(E, self._error))

    def match(self, *, ok: Callable[[V], T], fail: Callable[[E], T]) -> T:
        """Dispatch to ``ok`` or ``fail`` depending on the variant."""
        if self._is_success:
            return ok(cast(V, self._value))
        return fail(cast(E, self._error))

    def tap(self, fn: Callable[[V], object]) -> Result[V, E]:
        """Call ``fn`` with the value of a success for its side effect."""
        if self._is_success:
            fn(cast(V, self._value))
        return self

    def tap_error(self, fn: Callable[[E], object]) -> Result[V, E]:
        """Call ``fn`` with the error of a failure for its side effect."""
        if not self._is_success:
            fn(cast(E, self._error))
        return self


def is_ok(result: Result[Any, Any]) -> bool:
    """Return True if ``result`` is a success."""
    return result.is_success


def is_fail(result: Result[Any, Any]) -> bool:
    """Return True if ``result`` is a failure."""
    return result.is_failure


def combine_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Function form of `Result.combine`."""
    return Result.combine(results)


def sequence(*steps: Callable[[], Result[T, E]]) -> Result[list[T], E]:
    """Run ``steps`` in order, stopping at the first failure.

    Unlike `combine_results`, steps after a failure are never called.
    """
    values: list[T] = []
    for step in steps:
        result = step()
        if result.is_failure:
            return Result.fail(result.error)
        values.append(result.value)
    return Result.ok(values)
