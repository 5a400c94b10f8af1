"""Tests for care task endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from tests.conftest import FixedClock


class TestListTasks:
    """Test suite for GET /tasks endpoint."""

    def test_list_tasks(self, client: TestClient) -> None:
        """Test the default batch with its recommendations."""
        response = client.get("/api/v1/tasks")

        assert response.status_code == status.HTTP_200_OK
        tasks = response.json()["tasks"]
        assert [task["type"] for task in tasks] == ["Mowing", "Watering", "Fertilizing"]
        assert [task["duration"] for task in tasks] == [30, 15, 10]

        mowing, watering, fertilizing = tasks
        assert mowing["details"] == {
            "amount": 25,
            "unit": "mm",
            "description": "Target cut height",
            "available": True,
        }
        assert watering["recommended_amount"] == 33
        assert watering["recommended_unit"] == "min"
        assert fertilizing["details"]["amount"] == 1000
        assert fertilizing["details"]["unit"] == "g"

    def test_filter_by_day(self, client: TestClient) -> None:
        """Test only tasks on the given day are returned."""
        response = client.get("/api/v1/tasks", params={"day": "2024-05-15"})

        assert response.status_code == status.HTTP_200_OK
        assert [task["type"] for task in response.json()["tasks"]] == ["Fertilizing"]


class TestRecommendationsAfterEdits:
    """Test suite for task recommendations after profile and fertilizer edits."""

    def test_profile_patch_updates_stored_recommendations(self, client: TestClient) -> None:
        """Test each task reports one recommendation after the profile changes."""
        client.patch("/api/v1/profile", json={"area": 100})

        tasks = client.get("/api/v1/tasks").json()["tasks"]

        _, watering, fertilizing = tasks
        assert watering["recommended_amount"] == watering["details"]["amount"] == 67
        assert fertilizing["recommended_amount"] == fertilizing["details"]["amount"] == 2000

    def test_fertilizer_update_refreshes_recommendation(self, client: TestClient) -> None:
        """Test the fertilizing task follows the new nitrogen content."""
        client.put(
            "/api/v1/fertilizer",
            json={"id": "fert1", "name": "High nitrogen", "nitrogen_percentage": 20},
        )

        fertilizing = client.get("/api/v1/tasks").json()["tasks"][2]

        assert fertilizing["recommended_amount"] == fertilizing["details"]["amount"] == 500

    def test_profile_patch_keeps_completion(self, client: TestClient) -> None:
        """Test editing the profile does not reopen completed tasks."""
        client.post("/api/v1/tasks/1/toggle")
        client.patch("/api/v1/profile", json={"target_height": 40})

        mowing = client.get("/api/v1/tasks").json()["tasks"][0]

        assert mowing["completed"] is True
        assert mowing["details"]["amount"] == 40


class TestTaskDetails:
    """Test suite for GET /tasks/{id}/details endpoint."""

    def test_unavailable_when_irrigation_rate_is_zero(
        self, client: TestClient, store: LawnCareStore
    ) -> None:
        """Test watering details degrade instead of failing."""
        store.update_profile(irrigation_rate=0)

        response = client.get("/api/v1/tasks/2/details")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "amount": None,
            "unit": None,
            "description": "Irrigation rate is not configured",
            "available": False,
        }

    def test_unknown_task(self, client: TestClient) -> None:
        """Test 404 for a missing task."""
        response = client.get("/api/v1/tasks/99/details")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Task with id 99 not found"}


class TestToggleTask:
    """Test suite for POST /tasks/{id}/toggle endpoint."""

    def test_complete_records_labor_expense(self, client: TestClient) -> None:
        """Test completing a task adds its labor cost."""
        response = client.post("/api/v1/tasks/1/toggle")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Task completed"
        assert data["task"]["completed"] is True

        expenses = client.get("/api/v1/expenses").json()["expenses"]
        assert len(expenses) == 1
        assert expenses[0]["type"] == "labor"
        assert expenses[0]["amount"] == 750

    def test_reopen_keeps_expense(self, client: TestClient) -> None:
        """Test reopening a task does not remove its labor expense."""
        client.post("/api/v1/tasks/1/toggle")
        response = client.post("/api/v1/tasks/1/toggle")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Task reopened"
        assert data["task"]["completed"] is False
        assert len(client.get("/api/v1/expenses").json()["expenses"]) == 1

    def test_unknown_task(self, client: TestClient) -> None:
        """Test 404 and no side effects for a missing task."""
        response = client.post("/api/v1/tasks/99/toggle")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/v1/expenses").json()["expenses"] == []


class TestReschedule:
    """Test suite for POST /tasks/reschedule endpoint."""

    def test_reschedule_from_current_profile(
        self, client: TestClient, clock: FixedClock
    ) -> None:
        """Test a new incomplete batch derived from the edited profile."""
        client.post("/api/v1/tasks/1/toggle")
        client.patch("/api/v1/profile", json={"area": 30})
        clock.advance(days=1)

        response = client.post("/api/v1/tasks/reschedule")

        assert response.status_code == status.HTTP_200_OK
        tasks = response.json()["tasks"]
        assert tasks[0]["date"].startswith("2024-05-11")
        assert not any(task["completed"] for task in tasks)
        # 300 L at 15 L/min
        assert tasks[1]["recommended_amount"] == 20
