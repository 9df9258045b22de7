"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``WarehouseInputDTO``: one warehouse stock line.
- ``InventoryInputDTO``: the warehouses of a product.
- ``ProductInputDTO``: input for product creation and full replacement.

Derived fields a caller may echo back (``inventory.quantity`` and
``isMarketable``) are dropped like any other unknown field; the
service always recomputes them.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator

from modules.products.constants import WarehouseType


class WarehouseInputDTO(BaseModel):
    """Immutable DTO for a warehouse stock line.

    Validates:
    - ``locality`` is a non-empty string.
    - ``quantity`` is a non-negative integer.
    - ``type`` is one of ``WarehouseType``.
    """

    model_config = ConfigDict(frozen=True)

    locality: StrictStr
    quantity: StrictInt
    type: WarehouseType

    @field_validator("locality")
    @classmethod
    def locality_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Locality must not be empty.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        return v


class InventoryInputDTO(BaseModel):
    """Immutable DTO for the inventory block of a product."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    warehouses: Tuple[WarehouseInputDTO, ...]

    @field_validator("warehouses")
    @classmethod
    def warehouses_must_not_be_empty(
        cls, v: Tuple[WarehouseInputDTO, ...]
    ) -> Tuple[WarehouseInputDTO, ...]:
        if not v:
            raise ValueError("Inventory must list at least one warehouse.")
        return v


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/update requests.

    Validates:
    - ``sku`` is an integer greater than zero.
    - ``name`` is a non-empty string.
    - ``inventory.warehouses`` is a non-empty list.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    sku: StrictInt
    name: StrictStr
    inventory: InventoryInputDTO

    @field_validator("sku")
    @classmethod
    def sku_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("SKU must be greater than zero.")
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Name must not be empty.")
        return v
