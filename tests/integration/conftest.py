"""
Fixtures for API tests: the real application and use cases, wired to the
in-memory repositories instead of MongoDB.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from procircle.di.base_container import BaseContainer
from procircle.di.providers import AuthProvider, PostProvider, ServiceProvider, UserProvider
from procircle.domain.repositories import PostRepository, UserRepository


@pytest.fixture
def api_container(mock_settings, user_repo, post_repo):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(PostRepository, post_repo)
    with patch("procircle.di.providers.service_provider.get_settings", return_value=mock_settings):
        ServiceProvider.register(container)
    AuthProvider.register(container)
    UserProvider.register(container)
    PostProvider.register(container)
    return container


@pytest.fixture
def client(api_container):
    """Test client with MongoDB startup/shutdown hooks stubbed out."""
    from procircle.main import app

    with patch("procircle.api.v1.user_controller.get_container", return_value=api_container), patch(
        "procircle.api.v1.post_controller.get_container", return_value=api_container
    ), patch(
        "procircle.api.v1.dependencies.get_container", return_value=api_container
    ), patch(
        "procircle.main.ensure_indexes", new=AsyncMock()
    ), patch(
        "procircle.main.close_connection"
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def register(client):
    """Register through the API; the returned callable gives (token, user JSON)."""

    def _register(name="Alice", email="alice@example.com", password="secret123", **extra):
        response = client.post(
            "/api/users/register",
            json={"name": name, "email": email, "password": password, **extra},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["token"], body["user"]

    return _register


@pytest.fixture
def auth_header():
    return lambda token: {"Authorization": f"Bearer {token}"}
