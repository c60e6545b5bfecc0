"""Tests for admin endpoints."""

from dataclasses import replace

from fastapi.testclient import TestClient

from replate.api.app import create_app
from tests.conftest import DEMO_USER

HEADERS = {"X-Admin-Token": "admin-token"}


def test_reset_requires_token(container) -> None:
    client = TestClient(create_app(container))

    missing = client.post("/admin/reset")
    wrong = client.post("/admin/reset", headers={"X-Admin-Token": "nope"})

    assert missing.status_code == 401
    assert missing.json() == {"error": "Unauthorized"}
    assert wrong.status_code == 401


def test_reset_without_configured_token(container) -> None:
    container.settings.admin_token = None
    client = TestClient(create_app(container))

    response = client.post("/admin/reset", headers={"X-Admin-Token": ""})

    assert response.status_code == 401


def test_reset_restores_demo_data(container) -> None:
    client = TestClient(create_app(container))
    client.post("/pantry", json={"ingredientId": "2", "qty": 1})
    client.post("/mood-data", json={"userId": DEMO_USER, "mood": "calm"})

    response = client.post("/admin/reset", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {"success": True, "seeded": True}
    assert len(client.get(f"/pantry/{DEMO_USER}").json()) == 4
    assert client.get(f"/mood-data/{DEMO_USER}").json() == {"moodEntries": []}


def test_reset_requires_memory_store(container) -> None:
    client = TestClient(create_app(replace(container, store=None)))

    response = client.post("/admin/reset", headers=HEADERS)

    assert response.status_code == 400
    assert "in-memory" in response.json()["error"]
