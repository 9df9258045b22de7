"""Unit tests for ``derive_product`` (inventory aggregation)."""

from __future__ import annotations

import dataclasses

import pytest

from modules.products.constants import WarehouseType
from modules.products.dtos import ProductInputDTO
from modules.products.services import derive_product

pytestmark = pytest.mark.unit


def _dto(*quantities: int, **extra) -> ProductInputDTO:
    payload = {
        "sku": 10,
        "name": "Widget",
        "inventory": {
            "warehouses": [
                {"locality": f"L{i}", "quantity": q, "type": "ECOMMERCE"}
                for i, q in enumerate(quantities)
            ],
        },
    }
    payload.update(extra)
    return ProductInputDTO.model_validate(payload)


@pytest.mark.parametrize(
    "quantities, total, marketable",
    [
        ((5, 10), 15, True),
        ((0,), 0, False),
        ((0, 0, 0), 0, False),
        ((0, 1), 1, True),
        ((7,), 7, True),
    ],
)
def test_quantity_is_sum_and_marketable_iff_positive(quantities, total, marketable):
    product = derive_product(_dto(*quantities))

    assert product.inventory.quantity == total
    assert product.is_marketable is marketable


def test_preserves_identity_fields_and_warehouse_order():
    product = derive_product(_dto(3, 1, 2))

    assert product.sku == 10
    assert product.name == "Widget"
    assert [w.locality for w in product.inventory.warehouses] == ["L0", "L1", "L2"]
    assert all(w.type == WarehouseType.ECOMMERCE for w in product.inventory.warehouses)


def test_caller_supplied_derived_fields_are_ignored():
    dto = ProductInputDTO.model_validate(
        {
            "sku": 1,
            "name": "Liar",
            "inventory": {
                "quantity": 999,
                "warehouses": [{"locality": "SP", "quantity": 0, "type": "ECOMMERCE"}],
            },
            "isMarketable": True,
        }
    )

    product = derive_product(dto)

    assert product.inventory.quantity == 0
    assert product.is_marketable is False


def test_result_is_immutable_and_independent_of_input():
    dto = _dto(4)
    product = derive_product(dto)

    assert isinstance(product.inventory.warehouses, tuple)
    assert product.inventory.warehouses[0] is not dto.inventory.warehouses[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        product.inventory.warehouses[0].quantity = 100
    with pytest.raises(dataclasses.FrozenInstanceError):
        product.is_marketable = False


def test_is_pure():
    dto = _dto(1, 2)

    assert derive_product(dto) == derive_product(dto)
    assert dto.inventory.warehouses[0].quantity == 1
