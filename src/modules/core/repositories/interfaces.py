"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[K, T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on a concrete storage backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

K = TypeVar("K")
T = TypeVar("T")


class IRepository(ABC, Generic[K, T]):
    """Base generic repository contract.

    Type parameter ``K`` is the key the entity is stored under and ``T``
    the domain entity managed by the repository (e.g. ``Product``).
    Absence is reported with ``None``, never with an exception.
    """

    @abstractmethod
    def get(self, key: K) -> Optional[T]:
        """Retrieve an entity by its key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities in insertion order of their keys."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or fully replace) an entity."""

    @abstractmethod
    def delete(self, key: K) -> bool:
        """Remove an entity by key; a missing key is a no-op."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every entity."""
