"""Helpers for combining and slicing string-keyed mappings."""

from collections.abc import Iterable, Mapping
from typing import Any

from tessera.value_graph import clone
from tessera.value_graph.visited import IdentityMap


def merge(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Deep-merge ``sources`` from left to right into a new dict.

    When both the accumulated value and the incoming value under a key are
    dicts they are merged recursively; otherwise the incoming value replaces
    the accumulated one. Every value taken from a source is deep-cloned, so
    the result shares no mutable state with the sources. ``None`` sources
    are skipped.

    Example:
        ```py
        merge({"a": {"x": 1}, "b": 1}, {"a": {"y": 2}})
        # {"a": {"x": 1, "y": 2}, "b": 1}
        ```
    """
    return _merge(sources, IdentityMap())


def _merge(
    sources: Iterable[Mapping[str, Any] | None], seen: IdentityMap[dict[str, Any]]
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for source in sources:
        if source is None:
            continue
        # A cyclic source resolves to the merge already in progress for it.
        if source in seen:
            return seen[source]  # type: ignore[return-value]
        seen[source] = result
        for key, value in source.items():
            current = result.get(key)
            if isinstance(value, dict) and isinstance(current, dict):
                result[key] = _merge((current, value), seen)
            else:
                result[key] = clone(value)
    return result


def pick(mapping: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict with only the ``keys`` present in ``mapping``."""
    return {key: mapping[key] for key in keys if key in mapping}


def omit(mapping: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict without ``keys``."""
    excluded = set(keys)
    return {key: value for key, value in mapping.items() if key not in excluded}
