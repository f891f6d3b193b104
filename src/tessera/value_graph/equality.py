"""Deep structural equality of arbitrary, possibly cyclic, value graphs.

Two graphs are equal when they have the same shape and equal leaves,
regardless of object identity. Containers are compared by kind, not by exact
type: a ``FrozenList`` equals the ``list`` it was frozen from, a ``tuple``
equals a ``list`` with the same items, and a ``frozenset`` equals a ``set``.

Cycles
------
Before two containers are compared, the pair is recorded as "in progress" in
both directions (``a -> b`` and ``b -> a``). If the traversal runs into the
same pair again, that branch is assumed equal, which guarantees termination.
If it runs into ``a`` (or ``b``) paired with a different partner, the cycles
do not line up and the comparison fails. The marks are removed once the pair
has been decided, so a value shared in several places (without a cycle) is
compared by value every time it appears.

This is a pragmatic termination rule rather than a full bisimulation: two
differently shaped cyclic graphs whose cycles happen to line up can compare
equal.
"""

import math
import re
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from .kinds import Kind, classify, own_fields
from .visited import IdentityMap

_Comparer = Callable[[Any, Any, "_InProgress"], bool]


class _InProgress:
    """Container pairs currently being compared, tracked in both directions."""

    __slots__ = ("left", "right")

    def __init__(self) -> None:
        self.left: IdentityMap[object] = IdentityMap()
        self.right: IdentityMap[object] = IdentityMap()

    def involves(self, a: object, b: object) -> bool:
        return a in self.left or b in self.right

    def is_pair(self, a: object, b: object) -> bool:
        return self.left.get(a) is b and self.right.get(b) is a

    def enter(self, a: object, b: object) -> None:
        self.left[a] = b
        self.right[b] = a

    def leave(self, a: object, b: object) -> None:
        self.left.pop(a)
        self.right.pop(b)


def equals(a: object, b: object) -> bool:
    """Return True if ``a`` and ``b`` are structurally identical.

    Rules, applied in order:

    1. The same object is always equal to itself.
    2. ``None`` only equals ``None``.
    3. Values of different kinds are never equal.
    4. Primitives compare with ``==``, except that NaN equals NaN and a
       ``bool`` never equals a number.
    5. Dates compare by instant; patterns by source and flags.
    6. Arrays compare item by item; maps by matching keys and values; sets
       by matching members regardless of order; records by their own
       attributes in both directions. Map entries and set members of ``b``
       are paired with at most one counterpart in ``a``.

    Args:
        a: The first value.
        b: The second value.

    Returns:
        Whether the two graphs are equal.

    Example:
        ```py
        equals({"a": [1, {2, 3}]}, {"a": [1, {3, 2}]})  # True
        equals(float("nan"), float("nan"))  # True
        ```
    """
    return _equals(a, b, _InProgress())


def _equals(a: Any, b: Any, in_progress: _InProgress) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    kind = classify(a)
    if kind is not classify(b):
        return False

    match kind:
        case Kind.PRIMITIVE:
            return _primitives_equal(a, b)
        case Kind.DATE:
            return bool(a == b)
        case Kind.REGEXP:
            return _patterns_equal(a, b)

    if in_progress.involves(a, b):
        return in_progress.is_pair(a, b)
    in_progress.enter(a, b)
    try:
        return _COMPARERS[kind](a, b, in_progress)
    finally:
        in_progress.leave(a, b)


def _is_nan(value: object) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _primitives_equal(a: object, b: object) -> bool:
    if isinstance(a, bool) is not isinstance(b, bool):
        return False
    if _is_nan(a) and _is_nan(b):
        return True
    return bool(a == b)


def _patterns_equal(a: re.Pattern[Any], b: re.Pattern[Any]) -> bool:
    return a.pattern == b.pattern and a.flags == b.flags


def _arrays_equal(a: Any, b: Any, in_progress: _InProgress) -> bool:
    if len(a) != len(b):
        return False
    return all(_equals(x, y, in_progress) for x, y in zip(a, b))


def _maps_equal(a: dict[Any, Any], b: dict[Any, Any], in_progress: _InProgress) -> bool:
    if len(a) != len(b):
        return False
    # Entries of b only reachable by scanning; each one pairs up at most once.
    unmatched = [(key, value) for key, value in b.items() if not isinstance(key, str)]
    for key, value in a.items():
        # A str key can only match an equal str key, so a direct lookup suffices.
        if isinstance(key, str):
            if key not in b or not _equals(value, b[key], in_progress):
                return False
        elif not _take_matching_entry(key, value, unmatched, in_progress):
            return False
    return True


def _take_matching_entry(
    key: Any, value: Any, unmatched: list[tuple[Any, Any]], in_progress: _InProgress
) -> bool:
    for index, (other_key, other_value) in enumerate(unmatched):
        if _equals(key, other_key, in_progress) and _equals(value, other_value, in_progress):
            del unmatched[index]
            return True
    return False


def _sets_equal(a: Any, b: Any, in_progress: _InProgress) -> bool:
    if len(a) != len(b):
        return False
    unmatched = list(b)
    for member in a:
        for index, other in enumerate(unmatched):
            if _equals(member, other, in_progress):
                del unmatched[index]
                break
        else:
            return False
    return True


def _records_equal(a: Any, b: Any, in_progress: _InProgress) -> bool:
    fields_a, fields_b = own_fields(a), own_fields(b)
    if len(fields_a) != len(fields_b):
        return False
    for name, value in fields_a.items():
        if name not in fields_b or not _equals(value, fields_b[name], in_progress):
            return False
    return all(name in fields_a for name in fields_b)


_COMPARERS: dict[Kind, _Comparer] = {
    Kind.ARRAY: _arrays_equal,
    Kind.MAP: _maps_equal,
    Kind.SET: _sets_equal,
    Kind.PLAIN_OBJECT: _records_equal,
}
