"""Base class for entities: domain objects with a lasting identity."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from tessera.domain.entity_id import EntityId

B = TypeVar("B", str, int)


class Entity(abc.ABC, Generic[B]):
    """Generic base class for entities.

    Two entities are equal when their ids identify the same entity (see
    `EntityId`), whatever their properties. Properties are validated on
    construction.
    """

    def __init__(
        self, props: Mapping[str, Any], entity_id: EntityId[B] | None = None
    ) -> None:
        self._id: EntityId[B] = entity_id if entity_id is not None else EntityId.create()
        self._props: dict[str, Any] = dict(props)
        self.validate()

    @abc.abstractmethod
    def validate(self) -> None:
        """Check the entity's invariants.

        Raises:
            DomainError: If the entity is in an invalid state.
        """

    # --- Identity ---

    @property
    def id(self) -> EntityId[B]:
        """The entity's identity."""
        return self._id

    @property
    def client_id(self) -> str:
        """Shortcut for ``id.client_id``."""
        return self._id.client_id

    @property
    def business_id(self) -> B | None:
        """Shortcut for ``id.business_id``."""
        return self._id.business_id

    def set_business_id(self, business_id: B) -> None:
        """Assign the primary business id (write-once)."""
        self._id.set_business_id(business_id)

    def is_new(self) -> bool:
        """Return True while the entity has no business id."""
        return self._id.is_new()

    # --- State ---

    @property
    def props(self) -> dict[str, Any]:
        """A shallow copy of the entity's properties."""
        return dict(self._props)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the id and a shallow copy of the properties."""
        return {"id": self._id.to_dict(), "props": dict(self._props)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._id.equals(other.id)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, props={self._props!r})"
