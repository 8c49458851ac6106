"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from user_api.main import app
from user_api.services import get_user_directory
from user_common.models.user import User
from user_common.services.user_directory import InMemoryUserDirectory


@pytest.fixture
def seed_users() -> list[User]:
    """Two users with disjoint phone numbers."""
    return [
        User(id=1, email="ana@example.com", name="Ana", phone=["123"]),
        User(id=2, email="bruno@example.com", name="Bruno", phone=["456"]),
    ]


@pytest.fixture
def directory(seed_users: list[User]) -> InMemoryUserDirectory:
    """Create a fresh in-memory directory for each test."""
    return InMemoryUserDirectory(seed_users)


@pytest.fixture
def client(directory: InMemoryUserDirectory) -> Iterator[TestClient]:
    """Create a FastAPI test client backed by the test directory."""
    app.dependency_overrides[get_user_directory] = lambda: directory
    yield TestClient(app)
    app.dependency_overrides.clear()
