"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

# Type variable for entity ID (int, str, UUID, etc.)
TId = TypeVar("TId")


@dataclass
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states.

    Type Parameters:
        TId: Type of entity identifier (int, str, UUID)
    """

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id) if self.id is not None else id(self)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(UTC)


@dataclass
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Base class for aggregate roots.

    An aggregate root is the entry point to an aggregate.
    It controls access to all members of the aggregate
    and ensures invariants are maintained.
    """


@dataclass
class SoftDeletableEntity(Entity[TId], Generic[TId]):
    """
    Entity with soft delete support.

    Instead of physical deletion, marks entity as deleted.
    """

    deleted: bool = field(default=False)
    deleted_at: datetime | None = field(default=None)

    def soft_delete(self) -> None:
        """Mark entity as deleted."""
        self.deleted = True
        self.deleted_at = datetime.now(UTC)
        self.touch()

    def restore(self) -> None:
        """Restore a soft-deleted entity."""
        self.deleted = False
        self.deleted_at = None
        self.touch()

    def is_deleted(self) -> bool:
        """Check if entity is soft-deleted."""
        return self.deleted
