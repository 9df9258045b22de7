"""Product aggregate in its stored (derived) form.

Entities are frozen dataclasses holding tuples, so a record handed out
by the repository is a snapshot: nothing a caller does to it can reach
the repository's internal state.  Updates replace a record wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from modules.products.constants import WarehouseType


@dataclass(frozen=True)
class WarehouseEntry:
    """Stock held by a single warehouse."""

    locality: str
    quantity: int
    type: WarehouseType


@dataclass(frozen=True)
class Inventory:
    """Per-warehouse stock plus the derived total ``quantity``."""

    quantity: int
    warehouses: Tuple[WarehouseEntry, ...]


@dataclass(frozen=True)
class Product:
    """Product aggregate root, keyed by ``sku``.

    ``inventory.quantity`` and ``is_marketable`` are derived on every
    write by ``modules.products.services.derive_product``.
    """

    sku: int
    name: str
    inventory: Inventory
    is_marketable: bool

    def __str__(self) -> str:
        return f"{self.sku} - {self.name}"
