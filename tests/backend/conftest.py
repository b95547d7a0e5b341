"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with an in-memory document
store whose reads can be counted, delayed or failed, and with helpers
for overriding FastAPI dependencies.
"""

import sys
from pathlib import Path

import pytest

# Add backend and this directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))
sys.path.insert(0, str(Path(__file__).parent))

from fakes import FakeStore  # noqa: E402


@pytest.fixture
def fake_store():
    """Empty in-memory store; tests fill `collections` as needed."""
    return FakeStore()


@pytest.fixture
def override_store(app, fake_store):
    """Route every store dependency to the in-memory store."""
    from app.dependencies.store import get_store

    async def _get_store():
        return fake_store

    app.dependency_overrides[get_store] = _get_store
    return fake_store


@pytest.fixture
def as_user(app):
    """
    Authenticate requests as the given user.

    Usage:
        as_user(superuser)
        response = client.get("/settings/roles")
    """
    from app.core.session import ResolvedSession
    from app.dependencies.auth import get_current_active_user
    from app.dependencies.store import get_session

    def _as(user):
        async def _session():
            return ResolvedSession(user)

        async def _current_user():
            return user

        app.dependency_overrides[get_session] = _session
        app.dependency_overrides[get_current_active_user] = _current_user

    return _as
