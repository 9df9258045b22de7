"""Catalog service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
storage to the injected ``IProductRepository``.

Business rules enforced here:
- SKU must be unique among stored products.
- ``inventory.quantity`` is the sum of the warehouse quantities and
  ``is_marketable`` is ``quantity > 0``; both are recomputed on every
  write, whatever the caller sent.
- Updates are full replacements; changing the SKU moves the record to
  the new key, and only if that key is free.

Business-rule failures are returned as ``Err`` values, never raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Union

import structlog

from modules.products.entities import Inventory, Product, WarehouseEntry
from modules.products.exceptions import DuplicateSku, SkuNotFound
from shared.domain.result import Err, Ok, Result

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def derive_product(dto: ProductInputDTO) -> Product:
    """Build the stored form of a product from a validated input record.

    Warehouses are copied in order into fresh immutable entries, so the
    result never aliases the caller's data.
    """
    warehouses = tuple(
        WarehouseEntry(
            locality=warehouse.locality,
            quantity=warehouse.quantity,
            type=warehouse.type,
        )
        for warehouse in dto.inventory.warehouses
    )
    quantity = sum(warehouse.quantity for warehouse in warehouses)
    return Product(
        sku=dto.sku,
        name=dto.name,
        inventory=Inventory(quantity=quantity, warehouses=warehouses),
        is_marketable=quantity > 0,
    )


class CatalogService:
    """Application service for catalog use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Every command runs inside ``repository.atomic()`` so its checks and
    writes cannot interleave with another caller's.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductInputDTO) -> Result[int, DuplicateSku]:
        """Store a new product and return its SKU.

        Returns ``Err(DuplicateSku)`` if the SKU is already taken.
        """
        log = logger.bind(sku=dto.sku)

        with self._repo.atomic():
            existing = self._repo.get(dto.sku)
            if existing is not None:
                log.warning("product.duplicate_sku", existing_name=existing.name)
                return Err(DuplicateSku(sku=existing.sku, name=existing.name))
            self._save(dto)

        log.info("product.created")
        return Ok(dto.sku)

    def update_product(
        self, sku: int, dto: ProductInputDTO
    ) -> Result[None, Union[SkuNotFound, DuplicateSku]]:
        """Replace the product stored under ``sku`` with ``dto``.

        If ``dto.sku`` differs from ``sku`` the product is renamed: the
        target SKU is checked before anything is removed, so a failed
        rename leaves the original record untouched.

        Returns:
            ``Err(SkuNotFound)`` if nothing is stored under ``sku``;
            ``Err(DuplicateSku)`` if the rename target is taken.
        """
        log = logger.bind(sku=sku)

        with self._repo.atomic():
            if self._repo.get(sku) is None:
                log.warning("product.sku_not_found")
                return Err(SkuNotFound(sku))

            if dto.sku != sku:
                duplicated = self._repo.get(dto.sku)
                if duplicated is not None:
                    log.warning(
                        "product.duplicate_sku",
                        target_sku=dto.sku,
                        existing_name=duplicated.name,
                    )
                    return Err(DuplicateSku(sku=duplicated.sku, name=duplicated.name))
                self._repo.delete(sku)
                self._save(dto)
                log.info("product.renamed", new_sku=dto.sku)
                return Ok(None)

            self._save(dto)

        log.info("product.updated")
        return Ok(None)

    def remove_product(self, sku: int) -> Result[None, SkuNotFound]:
        """Delete the product stored under ``sku``.

        Returns ``Err(SkuNotFound)`` if nothing is stored under ``sku``.
        """
        with self._repo.atomic():
            if self._repo.get(sku) is None:
                logger.warning("product.sku_not_found", sku=sku)
                return Err(SkuNotFound(sku))
            self._repo.delete(sku)

        logger.info("product.removed", sku=sku)
        return Ok(None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every stored product in insertion order."""
        return self._repo.list()

    def find_product(self, sku: int) -> Optional[Product]:
        """Return the product stored under ``sku``, or ``None``."""
        return self._repo.get(sku)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _save(self, dto: ProductInputDTO) -> Product:
        return self._repo.save(derive_product(dto))
