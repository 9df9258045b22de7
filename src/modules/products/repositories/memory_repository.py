"""In-memory implementation of the Product repository.

Satisfies ``IProductRepository`` with a plain ``dict`` keyed by SKU.
Nothing is persisted: the catalog starts empty on every process start.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising; the Service Layer decides what a
missing product means.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

import structlog

from modules.products.entities import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class InMemoryProductRepository(IProductRepository):
    """Concrete Product repository backed by a process-local dict.

    A single ``RLock`` guards the map.  Iteration order is the insertion
    order of keys: overwriting a SKU keeps its position, deleting and
    re-inserting moves it to the end.
    """

    def __init__(self) -> None:
        self._products: Dict[int, Product] = {}
        self._lock = threading.RLock()

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            yield

    def get(self, key: int) -> Optional[Product]:
        with self._lock:
            return self._products.get(key)

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def save(self, entity: Product) -> Product:
        """Insert or fully replace the product stored under ``entity.sku``."""
        with self._lock:
            self._products[entity.sku] = entity
        logger.info("product.saved", sku=entity.sku)
        return entity

    def delete(self, key: int) -> bool:
        """Remove the product stored under ``key``.

        Returns ``True`` if a product was removed, ``False`` if none was
        stored under that SKU.
        """
        with self._lock:
            removed = self._products.pop(key, None)
        if removed is None:
            return False
        logger.info("product.deleted", sku=key)
        return True

    def clear(self) -> None:
        with self._lock:
            self._products.clear()
        logger.info("products.cleared")
