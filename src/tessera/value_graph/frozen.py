"""Immutable counterparts of the mutable built-in containers.

Python cannot freeze a ``list`` or a ``SimpleNamespace`` in place, so the
freeze engine builds replacement containers instead. Each one subclasses the
built-in type it replaces, which keeps ``isinstance`` checks, iteration and
JSON serialization working on frozen values.

* `FrozenList`: a ``list`` that rejects every mutating operation.
* `FrozenRecord`: a ``SimpleNamespace`` that rejects attribute assignment
  and deletion.
* `FrozenDict`: a ``dict`` with only ``str`` keys that rejects every
  mutating operation.
* `FrozenValuesDict` (dicts with any non-``str`` key) / `FrozenValuesSet`:
  the container itself stays mutable (entries can still be added or
  removed), but every key, value or member is frozen on the way in. Only the
  contents are immutable.

The freeze engine populates these containers through the base-class methods
(``list.append``, ``dict.__setitem__``, ...) so that a container can be
registered as a cycle target before its children are frozen. Constructing one
directly (``FrozenList([...])``) freezes the initial contents as well.

Equality on all of them delegates to the structural equality engine, so
comparing frozen graphs with ``==`` is cycle safe.
"""

from __future__ import annotations

import reprlib
from collections.abc import Callable, Iterable
from types import SimpleNamespace
from typing import Any, NoReturn

from .errors import FrozenValueError

# pylint: disable=import-outside-toplevel
# The engines import this module; importing them lazily avoids the cycle.


def _freeze(value: Any) -> Any:
    from .freeze import freeze

    return freeze(value)


def _equals(left: object, right: object) -> bool:
    from .equality import equals

    return equals(left, right)


def _rejects(operation: str) -> Callable[..., NoReturn]:
    """Build a method that refuses ``operation`` on a frozen container."""

    def reject(self: object, *args: Any, **kwargs: Any) -> NoReturn:
        raise FrozenValueError(type(self).__name__, operation)

    reject.__name__ = operation
    reject.__doc__ = f"Unsupported: frozen containers do not allow {operation}."
    return reject


def _not_equal(self: object, other: object) -> bool:
    result = self.__eq__(other)
    return result if result is NotImplemented else not result


class FrozenList(list):
    """A list whose length and items can no longer change."""

    __slots__ = ()

    __setitem__ = _rejects("item assignment")
    __delitem__ = _rejects("item deletion")
    __iadd__ = _rejects("in-place concatenation")
    __imul__ = _rejects("in-place repetition")
    append = _rejects("append")
    extend = _rejects("extend")
    insert = _rejects("insert")
    pop = _rejects("pop")
    remove = _rejects("remove")
    clear = _rejects("clear")
    sort = _rejects("sort")
    reverse = _rejects("reverse")

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        super().__init__(_freeze(item) for item in iterable)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return _equals(self, other)

    __ne__ = _not_equal

    __hash__ = None  # type: ignore[assignment]

    @reprlib.recursive_repr("FrozenList([...])")
    def __repr__(self) -> str:
        return f"FrozenList({list.__repr__(self)})"

    def __reduce__(self) -> tuple[type[FrozenList], tuple[list[Any]]]:
        return (type(self), (list(self),))


class FrozenRecord(SimpleNamespace):
    """A record whose attributes can no longer be assigned or deleted."""

    __setattr__ = _rejects("attribute assignment")
    __delattr__ = _rejects("attribute deletion")

    def __init__(self, **fields: Any) -> None:
        super().__init__(**{name: _freeze(value) for name, value in fields.items()})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleNamespace):
            return NotImplemented
        return _equals(self, other)

    __ne__ = _not_equal

    __hash__ = None  # type: ignore[assignment]


class FrozenDict(dict):
    """A string-keyed dict whose entries can no longer change.

    This is the frozen form of a JSON-style object: keys can be neither
    added, replaced nor removed.
    """

    __slots__ = ()

    __setitem__ = _rejects("item assignment")
    __delitem__ = _rejects("item deletion")
    __ior__ = _rejects("in-place merge")
    update = _rejects("update")
    setdefault = _rejects("setdefault")
    pop = _rejects("pop")
    popitem = _rejects("popitem")
    clear = _rejects("clear")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        entries = dict(*args, **kwargs)
        super().__init__({key: _freeze(value) for key, value in entries.items()})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, dict):
            return NotImplemented
        return _equals(self, other)

    __ne__ = _not_equal

    __hash__ = None  # type: ignore[assignment]

    @reprlib.recursive_repr("FrozenDict({...})")
    def __repr__(self) -> str:
        return f"FrozenDict({dict.__repr__(self)})"

    def __reduce__(self) -> tuple[type[FrozenDict], tuple[dict[str, Any]]]:
        return (type(self), (dict(self),))


class FrozenValuesDict(dict):
    """A dict whose keys and values are frozen as they are inserted.

    Entries may still be added, replaced or removed.
    """

    __slots__ = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__()
        self.update(*args, **kwargs)

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(_freeze(key), _freeze(value))

    def update(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        """Insert every entry of ``dict(*args, **kwargs)``, freezing each one."""
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: Any, default: Any = None) -> Any:
        """Insert a frozen ``default`` for a missing ``key`` and return the stored value."""
        if key not in self:
            self[key] = default
        return self[key]

    def __ior__(self, other: Any) -> FrozenValuesDict:  # type: ignore[override]
        self.update(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, dict):
            return NotImplemented
        return _equals(self, other)

    __ne__ = _not_equal

    __hash__ = None  # type: ignore[assignment]

    @reprlib.recursive_repr("FrozenValuesDict({...})")
    def __repr__(self) -> str:
        return f"FrozenValuesDict({dict.__repr__(self)})"

    def __reduce__(self) -> tuple[type[FrozenValuesDict], tuple[dict[Any, Any]]]:
        return (type(self), (dict(self),))


class FrozenValuesSet(set):
    """A set whose members are frozen as they are inserted.

    Members may still be added or discarded.
    """

    __slots__ = ()

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        super().__init__()
        self.update(iterable)

    def add(self, element: Any) -> None:
        """Freeze ``element`` and add it to the set."""
        super().add(_freeze(element))

    def update(self, *others: Iterable[Any]) -> None:
        """Freeze and add every member of ``others``."""
        for other in others:
            for element in other:
                self.add(element)

    def symmetric_difference_update(self, other: Iterable[Any]) -> None:
        """Keep members found in exactly one of the sets, freezing new ones."""
        incoming = {_freeze(element) for element in other}
        super().symmetric_difference_update(incoming)

    def __ior__(self, other: Any) -> FrozenValuesSet:  # type: ignore[override]
        self.update(other)
        return self

    def __ixor__(self, other: Any) -> FrozenValuesSet:  # type: ignore[override]
        self.symmetric_difference_update(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (set, frozenset)):
            return NotImplemented
        return _equals(self, other)

    __ne__ = _not_equal

    __hash__ = None  # type: ignore[assignment]

    @reprlib.recursive_repr("FrozenValuesSet({...})")
    def __repr__(self) -> str:
        return f"FrozenValuesSet({set.__repr__(self)})"


FROZEN_CONTAINER_TYPES: tuple[type, ...] = (
    FrozenList,
    FrozenRecord,
    FrozenDict,
    FrozenValuesDict,
    FrozenValuesSet,
)
