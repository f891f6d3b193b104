"""ID generators for entity client identifiers."""

import threading
import uuid

from ulid import monotonic

from tessera.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component, so entities created later sort after
    entities created earlier. This generator uses the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    Random identifiers with no ordering guarantees. This is the default
    generator for new entities.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential, zero-padded IDs.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate the next identifier in the sequence."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"


ID_GENERATORS: dict[str, type[IdGenerator]] = {
    "uuid4": UUIDv4Generator,
    "ulid": ULIDGenerator,
    "simple": SimpleIdGenerator,
}


def build_id_generator(name: str) -> IdGenerator:
    """Instantiate the ID generator registered under ``name``.

    Raises:
        KeyError: If no generator is registered under ``name``.
    """
    return ID_GENERATORS[name]()
