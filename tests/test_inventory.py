"""Tests for inventory endpoints."""

from typing import Any

from fastapi import status
from fastapi.testclient import TestClient

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore


def _create_item(client: TestClient, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Lawn seed",
        "category": "Seed",
        "stock_qty": 2,
        "unit": "kg",
        "cost_per_unit": 300,
    }
    payload.update(overrides)
    response = client.post("/api/v1/inventory", json=payload)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["item"]


class TestCreateInventoryItem:
    """Test suite for POST /inventory endpoint."""

    def test_create_records_purchase_expense(self, client: TestClient) -> None:
        """Test the item and its inventory expense are created together."""
        item = _create_item(client)

        assert item["total_cost"] == 600
        assert item["expense_id"] is not None

        expense = client.get("/api/v1/expenses").json()["expenses"][0]
        assert expense["id"] == item["expense_id"]
        assert expense["type"] == "inventory"
        assert expense["amount"] == 600
        assert expense["description"] == "Lawn seed"

    def test_create_priced_by_total(self, client: TestClient) -> None:
        """Test the unit cost is derived from the total paid."""
        item = _create_item(client, cost_per_unit=None, total_cost=2000, stock_qty=5)

        assert item["cost_per_unit"] == 400
        assert item["total_cost"] == 2000

    def test_create_requires_exactly_one_price(self, client: TestClient) -> None:
        """Test both or neither price fields are rejected."""
        response = client.post(
            "/api/v1/inventory",
            json={"name": "Seed", "stock_qty": 1, "cost_per_unit": 1, "total_cost": 1},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

        response = client.post("/api/v1/inventory", json={"name": "Seed", "stock_qty": 1})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_rejects_zero_cost(self, client: TestClient, store: LawnCareStore) -> None:
        """Test free purchases are rejected and record no expense."""
        response = client.post(
            "/api/v1/inventory",
            json={"name": "Free seed", "stock_qty": 2, "cost_per_unit": 0},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert store.list_inventory() == []
        assert store.list_expenses() == []

    def test_create_rejects_non_positive_quantity(
        self, client: TestClient, store: LawnCareStore
    ) -> None:
        """Test invalid items leave no expense behind."""
        response = client.post(
            "/api/v1/inventory", json={"name": "Seed", "stock_qty": 0, "cost_per_unit": 1}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert store.list_expenses() == []


class TestGetInventory:
    """Test suite for GET /inventory endpoints."""

    def test_list_newest_first(self, client: TestClient) -> None:
        """Test items are listed most recently added first."""
        first = _create_item(client, name="First")
        second = _create_item(client, name="Second")

        response = client.get("/api/v1/inventory")

        assert response.status_code == status.HTTP_200_OK
        assert [item["id"] for item in response.json()["items"]] == [second["id"], first["id"]]

    def test_get_unknown_item(self, client: TestClient) -> None:
        """Test 404 for a missing item."""
        response = client.get("/api/v1/inventory/ghost")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Inventory item with id ghost not found"}


class TestUpdateInventoryItem:
    """Test suite for PUT /inventory/{id} endpoint."""

    def test_update_syncs_expense(self, client: TestClient) -> None:
        """Test the purchase expense follows the new total and name."""
        item = _create_item(client)

        response = client.put(
            f"/api/v1/inventory/{item['id']}",
            json={"name": "Premium seed", "category": "Seed", "stock_qty": 3, "cost_per_unit": 300},
        )

        assert response.status_code == status.HTTP_200_OK
        updated = response.json()["item"]
        assert updated["expense_id"] == item["expense_id"]
        assert updated["total_cost"] == 900

        expense = client.get("/api/v1/expenses").json()["expenses"][0]
        assert expense["amount"] == 900
        assert expense["description"] == "Premium seed"

    def test_update_unknown_item(self, client: TestClient, store: LawnCareStore) -> None:
        """Test 404 and no side effects for a missing item."""
        response = client.put(
            "/api/v1/inventory/ghost",
            json={"name": "Ghost", "stock_qty": 1, "cost_per_unit": 1},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert store.list_inventory() == []


class TestDeleteInventoryItem:
    """Test suite for DELETE /inventory/{id} endpoint."""

    def test_delete_removes_expense(self, client: TestClient) -> None:
        """Test deleting an item deletes its purchase expense."""
        item = _create_item(client)

        response = client.delete(f"/api/v1/inventory/{item['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert client.get("/api/v1/inventory").json()["items"] == []
        assert client.get("/api/v1/expenses").json()["expenses"] == []

    def test_delete_unknown_item(self, client: TestClient) -> None:
        """Test 404 for a missing item."""
        response = client.delete("/api/v1/inventory/ghost")

        assert response.status_code == status.HTTP_404_NOT_FOUND
