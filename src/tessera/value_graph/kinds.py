"""Value classifier shared by the clone, freeze and equality engines."""

import datetime
import re
from collections.abc import Mapping
from enum import Enum
from types import SimpleNamespace
from typing import Any


class Kind(Enum):
    """The traversal rule that applies to a value."""

    PRIMITIVE = "primitive"
    DATE = "date"
    REGEXP = "regexp"
    ARRAY = "array"
    MAP = "map"
    SET = "set"
    PLAIN_OBJECT = "plain_object"


# Checked in order; the first matching entry wins.
_KIND_TABLE: tuple[tuple[type | tuple[type, ...], Kind], ...] = (
    (datetime.date, Kind.DATE),  # also covers datetime.datetime
    (re.Pattern, Kind.REGEXP),
    ((list, tuple), Kind.ARRAY),
    (dict, Kind.MAP),
    ((set, frozenset), Kind.SET),
    (SimpleNamespace, Kind.PLAIN_OBJECT),
)


def classify(value: object) -> Kind:
    """Classify a value into the kind that decides how it is traversed.

    Anything that is not one of the recognised containers is a primitive:
    it is treated as atomic, shared by reference when cloned or frozen, and
    compared with ``==``. This includes numbers, strings, bytes, enums,
    callables and arbitrary class instances.

    Args:
        value: Any runtime value.

    Returns:
        The `Kind` of the value.
    """
    if value is None or isinstance(value, (bool, int, float, complex, str, bytes)):
        return Kind.PRIMITIVE
    for types, kind in _KIND_TABLE:
        if isinstance(value, types):
            return kind
    return Kind.PRIMITIVE


def is_primitive(value: object) -> bool:
    """Return True if the value is atomic for the purposes of traversal."""
    return classify(value) is Kind.PRIMITIVE


def is_plain_object(value: object) -> bool:
    """Return True for attribute-bag records (``SimpleNamespace`` instances)."""
    return classify(value) is Kind.PLAIN_OBJECT


def own_fields(value: SimpleNamespace) -> Mapping[str, Any]:
    """Return the record's own attributes.

    Class-level attributes are deliberately not included; only what lives in
    the instance ``__dict__`` belongs to the value.
    """
    return vars(value)
