"""Product domain failures.

Returned by the Service Layer inside ``Err`` when a business rule is
violated.  The API layer (Views) inspects them and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog business-rule failures."""

    code: str = "catalog_error"


class DuplicateSku(CatalogError):
    """Another product already holds the target SKU."""

    code = "duplicate_sku"

    def __init__(self, sku: int, name: str) -> None:
        self.sku = sku
        self.name = name
        super().__init__(
            f"There is already a product named [{name}] with SKU [{sku}]"
        )


class SkuNotFound(CatalogError):
    """No product is stored under the addressed SKU."""

    code = "sku_not_found"

    def __init__(self, sku: int) -> None:
        self.sku = sku
        super().__init__(f"SKU [{sku}] not found")
