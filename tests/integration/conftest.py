"""
Fixtures for HTTP-level tests: a TestClient whose DI container is replaced.
"""
from contextlib import contextmanager
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from account_service.di.base_container import BaseContainer
from account_service.di.providers import AuthProvider, UserProvider
from account_service.domain.repositories.user_repository import UserRepository


@contextmanager
def _client_with_container(container):
    """Run the app (including its lifespan) against the given container."""
    from account_service.main import app

    with patch("account_service.api.v1.account_controller.get_container", return_value=container), patch(
        "account_service.api.v1.dependencies.get_container", return_value=container
    ), patch("account_service.main.get_container", return_value=container), patch(
        "account_service.main.close_database"
    ):
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c


@pytest.fixture
def client_with_container():
    """Factory fixture: context manager yielding a TestClient for a given container."""
    return _client_with_container


@pytest.fixture
def memory_container(user_repository):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    AuthProvider.register(container)
    UserProvider.register(container)
    return container


@pytest.fixture
def client(memory_container):
    """Client backed by the in-memory repository and the real use cases."""
    with _client_with_container(memory_container) as c:
        yield c
