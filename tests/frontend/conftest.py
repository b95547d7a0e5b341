"""
Frontend test fixtures and mocks.

Mocks Streamlit session_state and API client for isolated testing.
"""
import importlib

import pytest
from unittest.mock import MagicMock, patch


class MockSessionState(dict):
    """Mock st.session_state that behaves like both dict and attribute access."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Default state
        self.update({
            "is_authenticated": False,
            "user_id": None,
            "user": None,
            "token": None,
            "nav_page": "Calculator",
        })

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'SessionState' has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def mock_session_state():
    """Provide a mock session state for testing."""
    return MockSessionState()


@pytest.fixture
def authenticated_session_state():
    """Provide an authenticated mock session state."""
    state = MockSessionState()
    state.update({
        "is_authenticated": True,
        "user_id": "user-123",
        "token": "test-jwt-token",
    })
    return state


@pytest.fixture
def mock_streamlit(mock_session_state):
    """Patch streamlit module with mocks."""
    with patch.dict("sys.modules", {"streamlit": MagicMock()}):
        import sys
        st_mock = sys.modules["streamlit"]
        st_mock.session_state = mock_session_state
        yield st_mock


@pytest.fixture
def api_module(mock_streamlit):
    """frontend.utils.api bound to the mocked streamlit module."""
    import frontend.utils.api as module
    return importlib.reload(module)


@pytest.fixture
def mock_api_responses():
    """Common API response fixtures."""
    return {
        "health_ok": {"status": 200, "data": {"status": "healthy"}},
        "login_success": {
            "status": 200,
            "data": {
                "access_token": "jwt-token-abc123",
                "token_type": "bearer",
                "expires_in": 1800,
                "user_id": "user-123",
            },
        },
        "login_invalid": {
            "status": 401,
            "data": {"detail": "Invalid email or password"},
        },
        "validation_error": {
            "status": 422,
            "data": {"detail": [{"msg": "Input should be greater than 0"}]},
        },
        "roles_page": {
            "status": 200,
            "data": {
                "collection": "roles",
                "state": "ready",
                "items": [
                    {"id": "r1", "name": "Admin", "permissions": []},
                    {"id": "r2", "name": "Viewer", "permissions": []},
                ],
                "related": {},
                "error": None,
                "decode_errors": [],
            },
        },
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }


@pytest.fixture
def sample_calculation():
    """Sample saved calculation as returned by the API."""
    return {
        "id": "calc-1",
        "user_id": "user-123",
        "name": "Friday dinner",
        "bill": 120.0,
        "tip": 20.0,
        "people": 4,
        "tip_amount": 24.0,
        "total_amount": 144.0,
        "per_person_amount": 36.0,
        "created_at": "2026-10-16T19:30:00+00:00",
    }
