"""
Tests for the HTTP surface served next to Socket.IO.
"""

import pytest
from fastapi.testclient import TestClient

from crud.user import UserRepository
from main import create_app


@pytest.fixture
def registry():
    users = UserRepository()
    users.add_user("c1", "Alice", "lobby")
    users.add_user("c2", "Bob", "lobby")
    users.add_user("c3", "Carol", "kitchen")
    return users


@pytest.fixture
def client(registry):
    return TestClient(create_app(registry))


def test_index_serves_chat_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "chat message" in response.text


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_online_users(client):
    response = client.get("/status/online")

    assert response.status_code == 200
    assert response.json()["count"] == 3


def test_online_users_in_room(client):
    response = client.get("/status/online", params={"room": "lobby"})

    body = response.json()
    assert body["count"] == 2
    assert {user["name"] for user in body["users"]} == {"Alice", "Bob"}
    assert all(user["room"] == "lobby" for user in body["users"])


def test_online_users_in_empty_room(client):
    response = client.get("/status/online", params={"room": "attic"})

    assert response.json() == {"count": 0, "users": []}
