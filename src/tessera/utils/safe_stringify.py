"""Render arbitrary value graphs as JSON text without ever raising.

Used for display and logging, never for persistence: the output is lossy
(sets lose their type, opaque objects become strings) and is not meant to be
parsed back.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

from tessera.value_graph.kinds import Kind, classify, own_fields
from tessera.value_graph.visited import IdentityMap

logger = logging.getLogger(__name__)

CIRCULAR_MARKER = "[Circular ~]"  # pragma: no mutate
UNABLE_TO_STRINGIFY = "[Unable to stringify]"  # pragma: no mutate

JSON_SCALARS = (str, int, float, bool)


def safe_stringify(
    value: Any,
    *,
    indent: int | str | None = None,
    default: Callable[[Any], Any] | None = None,
) -> str:
    """Serialize ``value`` to JSON text, tolerating cycles and non-JSON types.

    Conversion rules:

    - A container that contains itself renders as ``"[Circular ~]"`` at the
      point where the cycle closes.
    - Dicts with only string keys become JSON objects; other dicts become
      ``{"_type": "Map", "entries": [[key, value], ...]}``.
    - Sets become ``{"_type": "Set", "values": [...]}``.
    - Records (``SimpleNamespace``) become JSON objects of their attributes.
    - Dates become ISO 8601 strings and patterns ``/pattern/``.
    - Any other object goes through ``default`` if given, else ``str()``.

    Args:
        value: The value to render.
        indent: Passed through to `json.dumps`.
        default: Converter for objects that have no JSON form.

    Returns:
        The JSON text, or ``"[Unable to stringify]"`` if conversion failed
        (for example because ``default`` raised).
    """
    try:
        return json.dumps(
            _to_jsonable(value, IdentityMap(), default or str),
            indent=indent,
            ensure_ascii=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Unable to stringify %s: %s", type(value).__name__, exc)
        return UNABLE_TO_STRINGIFY


def _to_jsonable(value: Any, ancestors: IdentityMap[bool], default: Callable[[Any], Any]) -> Any:
    kind = classify(value)
    if kind is Kind.PRIMITIVE:
        if value is None or isinstance(value, JSON_SCALARS):
            return value
        return default(value)
    if kind is Kind.DATE:
        return value.isoformat()
    if kind is Kind.REGEXP:
        return f"/{value.pattern!s}/"

    if value in ancestors:
        return CIRCULAR_MARKER
    ancestors[value] = True
    try:
        return _container_to_jsonable(kind, value, ancestors, default)
    finally:
        ancestors.pop(value)


def _container_to_jsonable(
    kind: Kind, value: Any, ancestors: IdentityMap[bool], default: Callable[[Any], Any]
) -> Any:
    def convert(item: Any) -> Any:
        return _to_jsonable(item, ancestors, default)

    match kind:
        case Kind.ARRAY:
            return [convert(item) for item in value]
        case Kind.MAP if all(isinstance(key, str) for key in value):
            return {key: convert(item) for key, item in value.items()}
        case Kind.MAP:
            return {
                "_type": "Map",
                "entries": [[convert(key), convert(item)] for key, item in value.items()],
            }
        case Kind.SET:
            return {"_type": "Set", "values": [convert(member) for member in value]}
        case _:
            return {name: convert(item) for name, item in own_fields(value).items()}
