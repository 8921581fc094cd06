"""Pytest fixtures for API integration tests.

Each test gets a fresh SQLite file and a client whose lifespan creates the
schema in the client's own event loop.
"""

import pytest
from fastapi.testclient import TestClient

from authcore.presentation.api.app import ACCOUNTS_PREFIX, create_app
from authcore.presentation.api.dependencies import clear_dependency_caches
from authcore_config import clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # noqa: S105


@pytest.fixture
def api_env(monkeypatch, tmp_path):
    """Point settings at a throwaway database with cheap hashing."""
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_JWT_SECRET)
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("HASH_MEMORY_COST_KIB", "64")
    monkeypatch.setenv("HASH_TIME_COST", "1")
    monkeypatch.setenv("HASH_MAX_PARALLELISM", "1")
    monkeypatch.setenv("API_DEBUG", "true")
    clear_settings_cache()
    clear_dependency_caches()
    yield
    clear_settings_cache()
    clear_dependency_caches()


@pytest.fixture
def client(api_env):
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def url():
    def _url(path: str) -> str:
        return f"{ACCOUNTS_PREFIX}{path}"

    return _url


@pytest.fixture
def register(client, url):
    """Register an account and return the response body."""

    def _register(**overrides) -> dict:
        body = {
            "email": "user@example.com",
            "username": "user",
            "first_name": "Test",
            "last_name": "User",
            "password": "securepassword123",
        }
        body.update(overrides)
        response = client.post(url("/register"), json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(client, url, register):
    """Register the default account and return bearer headers for it."""
    register()
    response = client.post(
        url("/login"),
        json={"email_or_username": "user", "password": "securepassword123"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
