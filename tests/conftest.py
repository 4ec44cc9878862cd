"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional

import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_contact_service,
    get_user_repository,
    reset_container,
)
from modules.auth.passwords import PasswordHasher
from modules.auth.service import AuthService
from modules.contacts.service import ContactService
from shared.config import get_settings
from shared.database import reset_client_cache

from tests.fakes import InMemoryContactRepository, InMemoryUserRepository


# Test JWT secret (only for testing); long enough to avoid HMAC key warnings
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


def create_test_token(
    user_id: str = "test-user-123",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    issued_at: Optional[datetime] = None,
) -> str:
    """
    Create a test session token.

    Args:
        user_id: Subject to include in the token
        expired: If True, creates a token that expired an hour ago
        secret: Signing secret
        issued_at: Override issuance time

    Returns:
        JWT token string
    """
    now = issued_at or datetime.now(timezone.utc)
    if expired:
        now = now - timedelta(hours=25)
    payload = {
        "sub": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=24)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Point settings at the test secret and fast hashing for every test."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def users_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def contacts_repo() -> InMemoryContactRepository:
    return InMemoryContactRepository()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def auth_service(users_repo, hasher) -> AuthService:
    return AuthService(users=users_repo, hasher=hasher)


@pytest.fixture
def contact_service(contacts_repo) -> ContactService:
    return ContactService(repository=contacts_repo)


@pytest.fixture
def app(auth_service, contact_service, users_repo):
    """App wired to in-memory repositories behind the real services."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_contact_service] = lambda: contact_service
    app.dependency_overrides[get_user_repository] = lambda: users_repo
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
