"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get("/products/999")
        assert response.status_code == 404
        data = response.json()
        assert data["type"] == "client_error"
        assert isinstance(data["errors"], list)
        assert data["errors"]
        assert "code" in data["errors"][0]
        assert "detail" in data["errors"][0]

    def test_validation_error_has_standard_format(self, api_client):
        response = api_client.post("/products", data="{", content_type="application/json")
        assert response.status_code == 400
        data = response.json()
        assert "type" in data
        assert "errors" in data
        assert isinstance(data["errors"], list)

    def test_payload_errors_point_at_field(self, api_client):
        response = api_client.post(
            "/products",
            {"sku": 1, "name": "x", "inventory": {"warehouses": [{"locality": "SP"}]}},
            format="json",
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        attrs = {error["attr"] for error in data["errors"]}
        assert attrs == {
            "inventory.warehouses.0.quantity",
            "inventory.warehouses.0.type",
        }

    def test_method_not_allowed_has_standard_format(self, api_client):
        response = api_client.patch("/products/1", {}, format="json")
        assert response.status_code == 405
        assert response.json()["errors"][0]["code"] == "method_not_allowed"
