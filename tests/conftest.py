"""Pytest configuration and fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from users_api.config import Settings
from users_api.main import create_app
from users_api.services.user_store import UserStore


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, environment="development", app_version="0.1.0")


@pytest.fixture
def store() -> UserStore:
    """Create an empty user store."""
    return UserStore()


@pytest.fixture
def app(settings: Settings, store: UserStore) -> FastAPI:
    """Create an application backed by a fresh store."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def create_user(client: TestClient):
    """Create a user through the API and return its JSON."""

    def _create(name: str = "Ann", email: str = "ann@x.com") -> dict:
        response = client.post("/users", json={"name": name, "email": email})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
