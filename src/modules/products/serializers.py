"""Product DRF serializers for API output.

The serializers operate at the Interface layer (API Views) and render
``Product`` entities.  Input validation happens in the Pydantic DTOs
from ``dtos.py``; ``ProductInputSerializer`` only documents the request
body for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.constants import WarehouseType


class WarehouseSerializer(serializers.Serializer):
    locality = serializers.CharField()
    quantity = serializers.IntegerField(min_value=0)
    type = serializers.ChoiceField(choices=WarehouseType.choices)


class InventorySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(read_only=True)
    warehouses = WarehouseSerializer(many=True)


class ProductSerializer(serializers.Serializer):
    """Read serializer for the Product resource."""

    sku = serializers.IntegerField(min_value=1)
    name = serializers.CharField()
    inventory = InventorySerializer()
    isMarketable = serializers.BooleanField(source="is_marketable", read_only=True)


class InventoryInputSerializer(serializers.Serializer):
    warehouses = WarehouseSerializer(many=True)


class ProductInputSerializer(serializers.Serializer):
    """Request body of product create/update (schema only)."""

    sku = serializers.IntegerField(min_value=1)
    name = serializers.CharField()
    inventory = InventoryInputSerializer()


class SkuSerializer(serializers.Serializer):
    sku = serializers.IntegerField()
