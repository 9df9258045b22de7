import copy

import pytest
from django.apps import apps
from rest_framework.test import APIClient

PRODUCTS_FIXTURE = [
    {
        "sku": 1,
        "name": "Item 1",
        "inventory": {
            "quantity": 500,
            "warehouses": [
                {"locality": "SP", "quantity": 500, "type": "ECOMMERCE"},
            ],
        },
        "isMarketable": True,
    },
    {
        "sku": 2,
        "name": "Item 2",
        "inventory": {
            "quantity": 200,
            "warehouses": [
                {"locality": "RJ", "quantity": 100, "type": "PHYSICAL_STORE"},
                {"locality": "MG", "quantity": 100, "type": "PHYSICAL_STORE"},
            ],
        },
        "isMarketable": True,
    },
]


@pytest.fixture(autouse=True)
def _reset_catalog():
    """Every test starts from an empty catalog."""
    repository = apps.get_app_config("products").repository
    repository.clear()
    yield
    repository.clear()


@pytest.fixture()
def catalog_service():
    """The ``CatalogService`` the views use."""
    return apps.get_app_config("products").service


@pytest.fixture()
def products_fixture():
    """Two stored-form product payloads, as the API renders them."""
    return copy.deepcopy(PRODUCTS_FIXTURE)


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
