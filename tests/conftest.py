"""
Global test fixtures for the auth service.

This module provides shared fixtures for all tests including:
- Test settings with fast password hashing
- The literal login scenario (request, salt, stored credential)
- FastAPI app and test client
"""

import sys
import uuid
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Settings
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with a test signing key and cheap hashing."""
    from authservice.config import Settings

    return Settings(
        credential_service_url="http://credentials.test",
        jwt_secret_key="test-secret-key",
        jwt_algorithm="HS256",
        jwt_access_token_expire_minutes=15,
        password_hash_rounds=1000,
        password_pepper="",
        expose_auth_failure_kind=False,
    )


@pytest.fixture
def hasher(test_settings):
    """PasswordHasher configured from test settings."""
    from authservice.core.security import PasswordHasher

    return PasswordHasher(
        rounds=test_settings.password_hash_rounds,
        pepper=test_settings.password_pepper,
    )


# =============================================================================
# Login Scenario Fixtures
# =============================================================================

@pytest.fixture
def salt() -> str:
    """Salt stored with the example credential."""
    return "Example_Salt1"


@pytest.fixture
def login_request():
    """Login request matching the example credential."""
    from authservice.schemas.auth import LoginRequest

    return LoginRequest(login_data="User_login_example", password="Example_1234")


@pytest.fixture
def user_id() -> uuid.UUID:
    """User id of the example credential."""
    return uuid.uuid4()


@pytest.fixture
def stored_credential(hasher, login_request, salt, user_id):
    """Stored credential whose hash matches login_request."""
    from authservice.models.credential import StoredCredential

    return StoredCredential(
        user_id=user_id,
        password_hash=hasher.hash(login_request.login_data, salt, login_request.password),
        salt=salt,
        login_data=login_request.login_data,
    )


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings):
    """
    FastAPI app with settings overridden for testing.

    Dependency overrides are cleared after each test.
    """
    from authservice.config import get_settings
    from authservice.main import app

    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c
