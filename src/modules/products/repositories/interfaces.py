"""Product repository interface.

Extends ``IRepository[int, Product]`` with the locking hook the service
needs to run its read-check-write sequences (unique SKU) atomically.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ContextManager

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.entities import Product


class IProductRepository(IRepository[int, "Product"]):
    """Repository contract for the Product aggregate, keyed by SKU."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Serialise a sequence of reads and writes against other callers.

        Must be re-entrant: the individual CRUD methods may be called
        while the block is held.
        """
