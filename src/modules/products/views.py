"""Product API views.

Exposes the ``CatalogService`` via HTTP using a DRF ViewSet.
Payloads are validated by the Pydantic DTOs; ``Err`` results from the
service are translated into HTTP status codes (404 / 409).
"""

from __future__ import annotations

import re
from typing import Optional

from django.apps import apps
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exception_handler import error_response, validation_error_response
from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import CatalogError, DuplicateSku, SkuNotFound
from modules.products.serializers import (
    ProductInputSerializer,
    ProductSerializer,
    SkuSerializer,
)
from shared.domain.result import Err

_SKU_PATTERN = re.compile(r"^-?\d+$")

_STATUS_BY_ERROR = {
    DuplicateSku: status.HTTP_409_CONFLICT,
    SkuNotFound: status.HTTP_404_NOT_FOUND,
}

SKU_PARAMETER = OpenApiParameter(
    "sku", int, OpenApiParameter.PATH, description="Product SKU."
)


def _parse_sku(raw: Optional[str]) -> Optional[int]:
    if raw is None or not _SKU_PATTERN.match(raw):
        return None
    return int(raw)


def _invalid_sku_response(raw: Optional[str]) -> Response:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        code="invalid_sku",
        detail=f"SKU must be an integer, got [{raw}].",
        attr="sku",
    )


def _catalog_error_response(error: CatalogError) -> Response:
    return error_response(_STATUS_BY_ERROR[type(error)], code=error.code, detail=str(error))


class ProductViewSet(ViewSet):
    """ViewSet for the catalog.

    Uses the ``CatalogService`` owned by the ``products`` app config, so
    every request of a process shares one in-memory catalog.
    """

    lookup_field = "sku"
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = apps.get_app_config("products").service

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        description="Gets all products",
        responses={200: ProductSerializer(many=True)},
    )
    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        description="Gets a product by SKU",
        parameters=[SKU_PARAMETER],
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(description="Product SKU not found"),
        },
    )
    def retrieve(self, request: Request, sku: Optional[str] = None) -> Response:
        """GET /products/{sku}"""
        parsed = _parse_sku(sku)
        if parsed is None:
            return _invalid_sku_response(sku)

        product = self._service.find_product(parsed)
        if product is None:
            return _catalog_error_response(SkuNotFound(parsed))
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        description="Creates a new product",
        request=ProductInputSerializer,
        responses={
            201: SkuSerializer,
            409: OpenApiResponse(description="Product SKU already exists"),
        },
    )
    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = ProductInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        result = self._service.create_product(dto)
        if isinstance(result, Err):
            return _catalog_error_response(result.error)

        return Response(
            SkuSerializer({"sku": result.value}).data,
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        description="Updates a product by SKU",
        parameters=[SKU_PARAMETER],
        request=ProductInputSerializer,
        responses={
            204: OpenApiResponse(description="Product updated"),
            404: OpenApiResponse(description="Product SKU not found"),
            409: OpenApiResponse(description="Product SKU already exists"),
        },
    )
    def update(self, request: Request, sku: Optional[str] = None) -> Response:
        """PUT /products/{sku}"""
        parsed = _parse_sku(sku)
        if parsed is None:
            return _invalid_sku_response(sku)

        try:
            dto = ProductInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        result = self._service.update_product(parsed, dto)
        if isinstance(result, Err):
            return _catalog_error_response(result.error)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        description="Removes a product by SKU",
        parameters=[SKU_PARAMETER],
        responses={
            204: OpenApiResponse(description="Product removed"),
            404: OpenApiResponse(description="Product SKU not found"),
        },
    )
    def destroy(self, request: Request, sku: Optional[str] = None) -> Response:
        """DELETE /products/{sku}"""
        parsed = _parse_sku(sku)
        if parsed is None:
            return _invalid_sku_response(sku)

        result = self._service.remove_product(parsed)
        if isinstance(result, Err):
            return _catalog_error_response(result.error)
        return Response(status=status.HTTP_204_NO_CONTENT)
