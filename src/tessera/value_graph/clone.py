"""Deep clone of arbitrary, possibly cyclic, value graphs."""

import re
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any, TypeVar

from .kinds import Kind, classify, own_fields
from .visited import IdentityMap

T = TypeVar("T")

_Cloner = Callable[[Any, IdentityMap[Any]], Any]


def clone(value: T) -> T:
    """Return a structurally independent copy of ``value``.

    Containers are copied recursively; primitives are shared since they are
    immutable. Cycles and shared references inside ``value`` are reproduced
    in the copy: every source container is copied exactly once and every
    later reference to it resolves to that single copy.

    Frozen containers are cloned into their ordinary mutable counterparts
    (``FrozenList`` becomes ``list``, ``FrozenRecord`` becomes
    ``SimpleNamespace`` and so on), which makes `clone` the inverse of
    `tessera.value_graph.freeze` as well.

    Args:
        value: The root of the graph to copy.

    Returns:
        The copy. Primitives are returned unchanged.

    Example:
        ```py
        original = {"a": {"b": 1}, "items": [1, 2, 3]}
        copied = clone(original)
        copied["a"]["b"] = 2
        assert original["a"]["b"] == 1
        ```
    """
    return _clone(value, IdentityMap())


def _clone(value: Any, visited: IdentityMap[Any]) -> Any:
    kind = classify(value)
    if kind is Kind.PRIMITIVE:
        return value
    if value in visited:
        return visited[value]
    return _CLONERS[kind](value, visited)


def clone_date(value: Any, visited: IdentityMap[Any]) -> Any:
    """Copy a date or datetime into a new instance for the same instant."""
    result = value.replace()
    visited[value] = result
    return result


def clone_pattern(value: re.Pattern[Any], visited: IdentityMap[Any]) -> re.Pattern[Any]:
    """Recompile a pattern from its source and flags."""
    result = re.compile(value.pattern, value.flags)
    visited[value] = result
    return result


def _clone_array(value: list[Any] | tuple[Any, ...], visited: IdentityMap[Any]) -> Any:
    if isinstance(value, tuple):
        items = tuple(_clone(item, visited) for item in value)
        # A cycle running back through this tuple may already have built it.
        if value in visited:
            return visited[value]
        visited[value] = items
        return items

    result: list[Any] = []
    visited[value] = result
    for item in value:
        result.append(_clone(item, visited))
    return result


def _clone_map(value: dict[Any, Any], visited: IdentityMap[Any]) -> dict[Any, Any]:
    result: dict[Any, Any] = {}
    visited[value] = result
    for key, item in value.items():
        result[_clone(key, visited)] = _clone(item, visited)
    return result


def _clone_set(value: set[Any] | frozenset[Any], visited: IdentityMap[Any]) -> Any:
    if isinstance(value, frozenset):
        members = frozenset(_clone(member, visited) for member in value)
        if value in visited:
            return visited[value]
        visited[value] = members
        return members

    result: set[Any] = set()
    visited[value] = result
    for member in value:
        result.add(_clone(member, visited))
    return result


def _clone_record(value: SimpleNamespace, visited: IdentityMap[Any]) -> SimpleNamespace:
    result = SimpleNamespace()
    visited[value] = result
    for name, item in own_fields(value).items():
        setattr(result, name, _clone(item, visited))
    return result


_CLONERS: dict[Kind, _Cloner] = {
    Kind.DATE: clone_date,
    Kind.REGEXP: clone_pattern,
    Kind.ARRAY: _clone_array,
    Kind.MAP: _clone_map,
    Kind.SET: _clone_set,
    Kind.PLAIN_OBJECT: _clone_record,
}
