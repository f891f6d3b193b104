"""Identity-keyed visited map used to make graph traversals cycle safe."""

from collections.abc import Iterator
from typing import Generic, TypeVar

V = TypeVar("V")


class IdentityMap(Generic[V]):
    """Map from object identity to the result produced for that object.

    Keys are compared with ``is``, never with ``==`` or ``hash``, so unhashable
    containers (lists, dicts, sets) can be tracked and two equal-but-distinct
    objects are never confused. A reference to every key object is held for
    the lifetime of the map so that ``id()`` values cannot be recycled while a
    traversal is running.

    A fresh map is created for every top-level engine call and discarded when
    it returns.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[int, tuple[object, V]] = {}

    def __contains__(self, source: object) -> bool:
        return id(source) in self._entries

    def __getitem__(self, source: object) -> V:
        try:
            return self._entries[id(source)][1]
        except KeyError:
            raise KeyError(f"{type(source).__name__} object at {id(source):#x} not visited") from None

    def __setitem__(self, source: object, result: V) -> None:
        self._entries[id(source)] = (source, result)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[object]:
        return (source for source, _ in self._entries.values())

    def get(self, source: object, default: V | None = None) -> V | None:
        """Return the result registered for ``source``, or ``default``."""
        if (entry := self._entries.get(id(source))) is None:
            return default
        return entry[1]

    def pop(self, source: object) -> V:
        """Remove ``source`` and return its result.

        Raises:
            KeyError: If ``source`` was never registered.
        """
        result = self[source]
        del self._entries[id(source)]
        return result
