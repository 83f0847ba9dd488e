"""
Shared pytest fixtures for account service tests.
"""
import os
from typing import Dict, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from account_service.core.exceptions import ConflictError, USER_ALREADY_EXISTS
from account_service.domain.models.user import User
from account_service.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_account_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "DEFAULT_USER_PIC": "https://example.com/default.png",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_user_collection = "users"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.default_user_pic = "https://example.com/default.png"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("account_service.core.config.get_settings", return_value=mock), patch(
        "account_service.core.security.get_settings", return_value=mock
    ), patch(
        "account_service.application.use_cases.auth.register_user.get_settings", return_value=mock
    ):
        yield mock


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository with the same uniqueness rule as the Mongo index."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return _copy(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return _copy(user) if user else None

    async def save(self, user: User) -> User:
        for other in self.users.values():
            if other.email == user.email and other.id != user.id:
                raise ConflictError(USER_ALREADY_EXISTS)
        if user.id:
            if user.id not in self.users:
                raise ValueError(f"User with ID {user.id} not found")
            stored = _copy(user)
        else:
            stored = _copy(user)
            stored.id = str(ObjectId())
        self.users[stored.id] = stored
        return _copy(stored)

    async def delete_by_id(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None


def _copy(user: User) -> User:
    return User(
        id=user.id,
        name=user.name,
        email=user.email,
        hashed_password=user.hashed_password,
        is_admin=user.is_admin,
        pic=user.pic,
    )


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture(autouse=True)
def fast_bcrypt():
    """Use the cheapest bcrypt cost so hashing-heavy tests stay quick."""
    with patch("account_service.core.security.BCRYPT_ROUNDS", 4):
        yield
