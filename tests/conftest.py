"""
Global test fixtures for TipSplit.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) and a document store over it
- Sessions and test user factories
- FastAPI test clients
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_tipsplit_db(mock_async_mongo_client):
    """Provide mock tipsplit_db database with the app's indexes."""
    from app.database.indexes import create_indexes

    db = mock_async_mongo_client["tipsplit_db"]
    await create_indexes(db)
    yield db


@pytest_asyncio.fixture
async def store(mock_tipsplit_db):
    """Document store over the mock database."""
    from app.database.store import MongoDocumentStore
    return MongoDocumentStore(mock_tipsplit_db)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "email": "testuser@example.com",
        "first_name": "Test",
        "last_name": "User",
        "password": "SecurePassword123!",
        "password_confirm": "SecurePassword123!",
    }


@pytest.fixture
def mock_user() -> dict:
    """A complete mock user document as returned by the store."""
    return {
        "id": "507f1f77bcf86cd799439011",
        "email": "testuser@example.com",
        "hashed_password": "$2b$12$LQv3c1yqBWVHxkd0LHAkCOYz6TtxMQJqhN8/X4.qOZ3q7K9V6X6Hy",
        "first_name": "Test",
        "last_name": "User",
        "role_id": None,
        "is_superuser": False,
        "status": "active",
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


@pytest.fixture
def user(mock_user):
    """The mock user as a model."""
    from app.models.user import User
    return User(**mock_user)


@pytest.fixture
def superuser(mock_user):
    from app.models.user import User
    return User(**{**mock_user, "id": "507f1f77bcf86cd799439099", "email": "admin@example.com", "is_superuser": True})


@pytest.fixture
def signed_in(user):
    """A resolved session for the mock user."""
    from app.core.session import ResolvedSession
    return ResolvedSession(user)


@pytest.fixture
def signed_out():
    """A resolved session with no user."""
    from app.core.session import ResolvedSession
    return ResolvedSession(None)


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Dependency overrides set by a test are cleared afterwards.
    """
    from app.main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Not entered as a context manager, so the lifespan (database
    connection and index creation) does not run.
    """
    yield TestClient(app)


def make_authenticated_request(client: TestClient, method: str, url: str, token: str, **kwargs):
    """
    Helper to make authenticated requests with token as query param.

    Args:
        client: TestClient instance
        method: HTTP method (get, post, put, patch, delete)
        url: Endpoint URL
        token: JWT token
        **kwargs: Additional arguments for the request

    Returns:
        Response object
    """
    separator = "&" if "?" in url else "?"
    authenticated_url = f"{url}{separator}token={token}"

    request_method = getattr(client, method.lower())
    return request_method(authenticated_url, **kwargs)
