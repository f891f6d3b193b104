"""Dual-identifier entity identity.

An entity is born with a client-side identifier (generated immediately, so a
new entity can be referenced before it is persisted) and may later receive up
to two business identifiers assigned by other systems, e.g. a database key
and an employee number. Each business identifier can be set only once.

Two ids denote the same entity when any of these hold, checked in order:

1. both have a primary business id and they are equal;
2. both have a secondary business id and they are equal;
3. one's primary business id equals the other's secondary business id
   (systems that store the same pair of keys in opposite roles);
4. the client ids are equal.

Because of rule 3 the relation is not transitive, so `EntityId` is not
hashable.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from tessera.domain.errors import IdentifierAlreadySetError, InvalidIdentifierError
from tessera.interfaces.id_generator import IdGenerator

B = TypeVar("B", str, int)


class EntityId(Generic[B]):
    """Identity of an entity: a client id plus optional business ids."""

    _default_generator: ClassVar[IdGenerator | None] = None

    def __init__(
        self,
        client_id: str,
        *,
        primary_business_id: B | None = None,
        secondary_business_id: B | None = None,
        created_at: datetime | None = None,
    ) -> None:
        self._client_id = client_id
        self._primary_business_id = primary_business_id
        self._secondary_business_id = secondary_business_id
        self._created_at = created_at or datetime.now(UTC)

    # --- Construction Paths ---

    @classmethod
    def create(cls, id_generator: IdGenerator | None = None) -> EntityId[B]:
        """Create an id for a brand-new entity.

        Args:
            id_generator: Generator for the client id. Defaults to the one
                installed with `use_id_generator`, or random UUIDv4 strings.
        """
        generator = id_generator or cls._default_generator
        client_id = generator.new_id() if generator else str(uuid.uuid4())
        return cls(client_id)

    @classmethod
    def restore(cls, data: Mapping[str, Any]) -> EntityId[B]:
        """Rebuild an id from the output of `to_dict`.

        The legacy ``business_id`` key is accepted as the primary business id
        when ``primary_business_id`` is absent.

        Raises:
            KeyError: If ``client_id`` is missing.
        """
        primary = data.get("primary_business_id")
        if primary is None:
            primary = data.get("business_id")
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            data["client_id"],
            primary_business_id=primary,
            secondary_business_id=data.get("secondary_business_id"),
            created_at=created_at,
        )

    @classmethod
    def use_id_generator(cls, id_generator: IdGenerator | None) -> None:
        """Install the process-wide default generator (None restores UUIDv4)."""
        cls._default_generator = id_generator

    # --- Accessors ---

    @property
    def client_id(self) -> str:
        """The client-side identifier, always present."""
        return self._client_id

    @property
    def primary_business_id(self) -> B | None:
        """The primary business identifier, if assigned."""
        return self._primary_business_id

    @property
    def secondary_business_id(self) -> B | None:
        """The secondary business identifier, if assigned."""
        return self._secondary_business_id

    @property
    def business_id(self) -> B | None:
        """Alias of `primary_business_id`."""
        return self._primary_business_id

    @property
    def created_at(self) -> datetime:
        """When the id was created (UTC)."""
        return self._created_at

    @property
    def value(self) -> B | str:
        """The most meaningful identifier: primary, else secondary, else client id."""
        if self._primary_business_id is not None:
            return self._primary_business_id
        if self._secondary_business_id is not None:
            return self._secondary_business_id
        return self._client_id

    def has_primary_business_id(self) -> bool:
        """Return True once a primary business id has been assigned."""
        return self._primary_business_id is not None

    def has_secondary_business_id(self) -> bool:
        """Return True once a secondary business id has been assigned."""
        return self._secondary_business_id is not None

    def has_business_id(self) -> bool:
        """Alias of `has_primary_business_id`."""
        return self.has_primary_business_id()

    def has_any_business_id(self) -> bool:
        """Return True if either business id has been assigned."""
        return self.has_primary_business_id() or self.has_secondary_business_id()

    def is_new(self) -> bool:
        """Return True while no business id has been assigned."""
        return not self.has_any_business_id()

    # --- Mutation (write-once) ---

    def set_primary_business_id(self, business_id: B) -> None:
        """Assign the primary business id.

        Raises:
            IdentifierAlreadySetError: If it was already assigned.
            InvalidIdentifierError: If ``business_id`` is None.
        """
        self._primary_business_id = self._checked(
            self._primary_business_id, business_id, "Primary business ID"
        )

    def set_secondary_business_id(self, business_id: B) -> None:
        """Assign the secondary business id.

        Raises:
            IdentifierAlreadySetError: If it was already assigned.
            InvalidIdentifierError: If ``business_id`` is None.
        """
        self._secondary_business_id = self._checked(
            self._secondary_business_id, business_id, "Secondary business ID"
        )

    def set_business_id(self, business_id: B) -> None:
        """Alias of `set_primary_business_id`."""
        self._primary_business_id = self._checked(
            self._primary_business_id, business_id, "Business ID"
        )

    @staticmethod
    def _checked(current: B | None, new: B | None, label: str) -> B:
        if current is not None:
            raise IdentifierAlreadySetError(label)
        if new is None:
            raise InvalidIdentifierError(label)
        return new

    # --- Equivalence ---

    def equals(self, other: EntityId[Any] | None) -> bool:
        """Return True if ``other`` identifies the same entity (see module docs)."""
        if other is None:
            return False
        mine = (self._primary_business_id, self._secondary_business_id)
        theirs = (other.primary_business_id, other.secondary_business_id)
        for left, right in (
            (mine[0], theirs[0]),
            (mine[1], theirs[1]),
            (mine[0], theirs[1]),
            (mine[1], theirs[0]),
        ):
            if left is not None and right is not None and left == right:
                return True
        return self._client_id == other.client_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityId):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # --- Plumbing ---

    def __str__(self) -> str:
        parts: list[str] = []
        if self.has_primary_business_id() and not self.has_secondary_business_id():
            parts.append(f"business: {self._primary_business_id}")
        else:
            if self.has_primary_business_id():
                parts.append(f"primary: {self._primary_business_id}")
            if self.has_secondary_business_id():
                parts.append(f"secondary: {self._secondary_business_id}")
        parts.append(f"client: {self._client_id}")
        return f"EntityId({', '.join(parts)})"

    def __repr__(self) -> str:
        return str(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict that `restore` accepts."""
        data: dict[str, Any] = {
            "client_id": self._client_id,
            "created_at": self._created_at.isoformat(),
        }
        if self.has_primary_business_id():
            data["primary_business_id"] = self._primary_business_id
            data["business_id"] = self._primary_business_id
        if self.has_secondary_business_id():
            data["secondary_business_id"] = self._secondary_business_id
        return data

    def clone(self) -> EntityId[B]:
        """Return an independent copy."""
        return type(self).restore(self.to_dict())
