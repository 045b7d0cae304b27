"""Tests for the FastAPI surface.

Requests go through the HTTP routes into the handlers and a SQLite store.
"""

import os
import tempfile

import pytest
from fastapi.testclient import TestClient

from product_service.api import create_app
from product_service.services import ProductStore


class TestProductApi:
    """Test HTTP routing to the product handlers."""

    @pytest.fixture
    def temp_db_path(self):
        """Create a temporary database file for testing."""
        fd, path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        yield path
        # Cleanup
        if os.path.exists(path):
            os.remove(path)

    @pytest.fixture
    def client(self, temp_db_path):
        store = ProductStore(backend="sqlite", table_name="products", sqlite_path=temp_db_path)
        with TestClient(create_app(store=store)) as client:
            yield client

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_crud_round_trip(self, client):
        created = client.post(
            "/products",
            json={"name": "Widget A", "price": 9.99, "category": "tools", "stock": 5},
        )
        assert created.status_code == 201
        product_id = created.json()["productId"]

        fetched = client.get(f"/products/{product_id}")
        assert fetched.status_code == 200
        assert fetched.headers["content-type"] == "application/json"
        assert fetched.json()["Name"] == "Widget A"

        updated = client.put(
            f"/products/{product_id}",
            json={"name": "Widget B", "price": 5, "category": "tools", "stock": 1},
        )
        assert updated.status_code == 200
        assert updated.json()["Name"] == "Widget B"

        deleted = client.delete(f"/products/{product_id}")
        assert deleted.status_code == 204
        assert deleted.content == b""

        assert client.get(f"/products/{product_id}").status_code == 404

    def test_validation_error(self, client):
        response = client.post(
            "/products",
            json={"name": "AB", "price": 1, "category": "x", "stock": 1},
        )

        assert response.status_code == 400
        assert response.json() == {"error": '"name" length must be at least 3 characters long'}

    def test_empty_body(self, client):
        response = client.post("/products")

        assert response.status_code == 400
        assert response.json() == {"error": "Request body is required"}

    def test_non_utf8_body(self, client):
        response = client.post("/products", content=b"\xff\xfe{}")

        assert response.status_code == 400
        assert response.json() == {"error": "Request body must be valid JSON"}

    def test_delete_unknown_product(self, client):
        assert client.delete("/products/never-created").status_code == 204

    def test_update_unknown_product(self, client):
        response = client.put(
            "/products/never-created",
            json={"name": "Widget A", "price": 9.99, "category": "tools", "stock": 5},
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}
