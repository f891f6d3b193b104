"""Deep freeze of arbitrary, possibly cyclic, value graphs.

Freezing builds immutable counterparts instead of mutating the input:

============================  =============================================
Source                        Frozen result
============================  =============================================
primitive                     the same object
``date`` / ``datetime``       a new, equal instance (already immutable)
``re.Pattern``                a recompiled pattern (already immutable)
``list``                      `FrozenList`
``tuple``                     ``tuple`` of frozen items
``SimpleNamespace``           `FrozenRecord`
``dict`` with ``str`` keys    `FrozenDict`
``dict`` (other keys)         `FrozenValuesDict` (contents frozen only)
``set``                       `FrozenValuesSet` (contents frozen only)
``frozenset``                 ``frozenset`` of frozen members
============================  =============================================

A dict whose keys are all strings is the Python form of a JSON-style object
and is frozen completely. Dicts keyed by anything else, and sets, keep a
mutable shape on purpose: entries can still be added or removed, but whatever
goes in is frozen first. Callers rely on being able to extend such containers
after freezing.
"""

from types import SimpleNamespace
from typing import Any, TypeVar

from .clone import clone_date, clone_pattern
from .frozen import (
    FROZEN_CONTAINER_TYPES,
    FrozenDict,
    FrozenList,
    FrozenRecord,
    FrozenValuesDict,
    FrozenValuesSet,
)
from .kinds import Kind, classify, own_fields
from .visited import IdentityMap

T = TypeVar("T")


def freeze(value: T) -> T:
    """Return an immutable version of ``value``.

    Already-frozen containers are returned as they are, without revisiting
    their children. Cycles are preserved: each source container is frozen
    once and every reference to it resolves to the same frozen result.

    Args:
        value: The root of the graph to freeze.

    Returns:
        The frozen graph. Mutating any list, record or string-keyed dict
        in it raises `FrozenValueError`.

    Example:
        ```py
        frozen = freeze({"a": {"b": 1}, "items": [1, 2, 3]})
        frozen["items"].append(4)  # raises FrozenValueError
        frozen["a"]["b"] = 2  # raises FrozenValueError
        ```
    """
    return _freeze(value, IdentityMap())


def is_frozen(value: object) -> bool:
    """Return True if ``value`` is a primitive or a frozen container.

    Dates, patterns, tuples and frozensets return False: they are immutable,
    but they are not products of `freeze` and may still hold mutable children.
    """
    return classify(value) is Kind.PRIMITIVE or isinstance(value, FROZEN_CONTAINER_TYPES)


def _freeze(value: Any, visited: IdentityMap[Any]) -> Any:
    kind = classify(value)
    if kind is Kind.PRIMITIVE:
        return value
    if value in visited:
        return visited[value]
    if isinstance(value, FROZEN_CONTAINER_TYPES):
        return value

    match kind:
        case Kind.DATE:
            return clone_date(value, visited)
        case Kind.REGEXP:
            return clone_pattern(value, visited)
        case Kind.ARRAY:
            return _freeze_array(value, visited)
        case Kind.MAP:
            return _freeze_map(value, visited)
        case Kind.SET:
            return _freeze_set(value, visited)
        case Kind.PLAIN_OBJECT:
            return _freeze_record(value, visited)
        case _:  # pragma: no cover
            raise AssertionError(f"unhandled kind: {kind}")


def _freeze_array(value: list[Any] | tuple[Any, ...], visited: IdentityMap[Any]) -> Any:
    if isinstance(value, tuple):
        items = tuple(_freeze(item, visited) for item in value)
        # A cycle running back through this tuple may already have built it.
        if value in visited:
            return visited[value]
        visited[value] = items
        return items

    result = FrozenList()
    visited[value] = result
    for item in value:
        list.append(result, _freeze(item, visited))
    return result


def _freeze_map(value: dict[Any, Any], visited: IdentityMap[Any]) -> dict[Any, Any]:
    string_keyed = all(isinstance(key, str) for key in value)
    result = FrozenDict() if string_keyed else FrozenValuesDict()
    visited[value] = result
    for key, item in value.items():
        dict.__setitem__(result, _freeze(key, visited), _freeze(item, visited))
    return result


def _freeze_set(value: set[Any] | frozenset[Any], visited: IdentityMap[Any]) -> Any:
    if isinstance(value, frozenset):
        members = frozenset(_freeze(member, visited) for member in value)
        if value in visited:
            return visited[value]
        visited[value] = members
        return members

    result = FrozenValuesSet()
    visited[value] = result
    for member in value:
        set.add(result, _freeze(member, visited))
    return result


def _freeze_record(value: SimpleNamespace, visited: IdentityMap[Any]) -> FrozenRecord:
    result = FrozenRecord()
    visited[value] = result
    fields = vars(result)
    for name, item in own_fields(value).items():
        fields[name] = _freeze(item, visited)
    return result
