"""Tests for the /users endpoints."""

import pytest
from fastapi.testclient import TestClient

from user_api.main import app
from user_api.services import get_user_directory
from user_common.services.user_directory import InMemoryUserDirectory

NEW_USER = {"id": 3, "email": "carla@example.com", "name": "Carla", "phone": ["789"]}


@pytest.mark.unit
def test_list_users(client: TestClient) -> None:
    response = client.get("/users")

    assert response.status_code == 200
    assert [u["id"] for u in response.json()] == [1, 2]


@pytest.mark.unit
def test_list_users_sorted_by(client: TestClient) -> None:
    client.post("/users", json={**NEW_USER, "name": "Aaron"})

    response = client.get("/users", params={"sortedBy": "name"})

    assert response.status_code == 200
    assert [u["name"] for u in response.json()] == ["Aaron", "Ana", "Bruno"]
    assert [u["id"] for u in client.get("/users").json()] == [1, 2, 3]


@pytest.mark.unit
def test_get_user(client: TestClient) -> None:
    response = client.get("/users/2")

    assert response.status_code == 200
    assert response.json()["name"] == "Bruno"


@pytest.mark.unit
def test_create_user(client: TestClient) -> None:
    response = client.post("/users", json={**NEW_USER, "city": "Lima"})

    assert response.status_code == 201
    assert response.json() == {**NEW_USER, "city": "Lima"}
    assert len(client.get("/users").json()) == 3


@pytest.mark.unit
def test_create_user_with_taken_phone(client: TestClient) -> None:
    response = client.post("/users", json={**NEW_USER, "phone": ["000", "123"]})

    assert response.status_code == 400
    assert response.json() == {"error": "Phone numbers must be unique."}
    assert len(client.get("/users").json()) == 2


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        {"id": 3, "email": "x@example.com", "name": "X"},
        {"id": "three", "email": "x@example.com", "name": "X", "phone": ["1"]},
        {"id": 3, "email": "x@example.com", "name": "X", "phone": "789"},
    ],
)
def test_create_user_with_malformed_body(client: TestClient, body: dict) -> None:
    response = client.post("/users", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request."
    assert response.json()["details"]


@pytest.mark.unit
def test_update_user(client: TestClient) -> None:
    response = client.patch("/users/2", json={"name": "x"})

    assert response.status_code == 200
    assert response.json() == {"id": 2, "email": "bruno@example.com", "name": "x", "phone": ["456"]}


@pytest.mark.unit
def test_update_unknown_user(client: TestClient) -> None:
    response = client.patch("/users/99", json={"name": "x"})

    assert response.status_code == 404
    assert response.json() == {"error": "User not found."}


@pytest.mark.unit
def test_update_user_with_taken_phone(client: TestClient) -> None:
    response = client.patch("/users/2", json={"phone": ["123"]})

    assert response.status_code == 400
    assert client.get("/users/2").json()["phone"] == ["456"]


@pytest.mark.unit
def test_delete_user(client: TestClient) -> None:
    response = client.delete("/users/1")

    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert [u["id"] for u in client.get("/users").json()] == [2]


@pytest.mark.unit
def test_delete_unknown_user(client: TestClient) -> None:
    response = client.delete("/users/99")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found."}
    assert len(client.get("/users").json()) == 2


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "body"),
    [("GET", None), ("PATCH", {"name": "x"}), ("DELETE", None)],
)
def test_malformed_id(client: TestClient, method: str, body: dict | None) -> None:
    response = client.request(method, "/users/abc", json=body)

    assert response.status_code == 400
    assert "Invalid user id" in response.json()["error"]
    assert len(client.get("/users").json()) == 2


@pytest.mark.unit
def test_update_user_with_null_required_field(client: TestClient) -> None:
    before = client.get("/users/1").json()

    response = client.patch("/users/1", json={"name": None})

    assert response.status_code == 400
    assert "Invalid update for user 1" in response.json()["error"]
    assert client.get("/users/1").json() == before


@pytest.mark.unit
def test_unexpected_error_returns_json_500(directory: InMemoryUserDirectory, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_list_users(sorted_by=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(directory, "list_users", broken_list_users)
    app.dependency_overrides[get_user_directory] = lambda: directory
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/users")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}


@pytest.mark.unit
def test_walkthrough(client: TestClient) -> None:
    """Conflict, create, patch and delete against the two seed users."""
    assert client.post("/users", json={**NEW_USER, "phone": ["123"]}).status_code == 400
    assert len(client.get("/users").json()) == 2

    assert client.post("/users", json=NEW_USER).status_code == 201
    assert len(client.get("/users").json()) == 3

    patched = client.patch("/users/2", json={"name": "x"})
    assert patched.status_code == 200
    assert patched.json()["name"] == "x"
    assert patched.json()["phone"] == ["456"]

    deleted = client.delete("/users/1")
    assert deleted.status_code == 200
    assert deleted.json()["id"] == 1

    remaining = client.get("/users").json()
    assert len(remaining) == 2
    assert 1 not in [u["id"] for u in remaining]
