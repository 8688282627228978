"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Callable, Optional

import jwt  # PyJWT
from fastapi.testclient import TestClient

from api import app
from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from shared.config import get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, the auth singleton and the service container."""
    get_settings.cache_clear()
    reset_auth_service()
    reset_container()
    yield
    app.dependency_overrides.clear()
    reset_container()
    reset_auth_service()
    get_settings.cache_clear()


@pytest.fixture
def jwt_secret(monkeypatch) -> str:
    """Configure the signing secret through the environment."""
    monkeypatch.setenv("YOGA_JWT_SECRET", TEST_JWT_SECRET)
    get_settings.cache_clear()
    reset_auth_service()
    return TEST_JWT_SECRET


@pytest.fixture
def make_token() -> Callable[..., str]:
    """
    Factory for signed test tokens.

    Args:
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret, defaults to TEST_JWT_SECRET
    """

    def _make_token(
        email: str = "test@example.com",
        expired: bool = False,
        secret: Optional[str] = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
        payload = {
            "sub": email,
            "email": email,
            "exp": int(exp.timestamp()),
            "iat": int((now - timedelta(hours=2)).timestamp()),
        }
        return jwt.encode(payload, secret or TEST_JWT_SECRET, algorithm="HS256")

    return _make_token


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(jwt_secret: str, make_token, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return make_token(email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def client() -> TestClient:
    """Test client for the API app."""
    return TestClient(app)
