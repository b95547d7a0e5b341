"""
Integration tests for the settings and calculator flow.

These tests require a running backend and database.
Run with: pytest -m integration tests/integration/

Requires:
- Backend running at BACKEND_URL (default: http://localhost:8000)
- MongoDB available to the backend
"""
import time

import httpx
import pytest


pytestmark = pytest.mark.integration


class TestSettingsFlow:
    """End-to-end checks against a live backend."""

    @pytest.fixture(autouse=True)
    def setup(self, live_backend_url, test_timeout):
        """Register and log in a unique user."""
        self.base_url = live_backend_url
        self.timeout = test_timeout
        email = f"integration_test_{int(time.time() * 1000)}@example.com"
        password = "TestPassword123!"
        try:
            httpx.post(
                f"{self.base_url}/auth/register",
                json={"email": email, "password": password, "password_confirm": password},
                timeout=self.timeout,
            )
            login = httpx.post(
                f"{self.base_url}/auth/login",
                json={"email": email, "password": password},
                timeout=self.timeout,
            )
        except httpx.ConnectError:
            pytest.skip("Backend not running")
        assert login.status_code == 200
        self.token = login.json()["access_token"]

    def _params(self):
        return {"token": self.token}

    def test_health_check(self):
        response = httpx.get(f"{self.base_url}/health", timeout=self.timeout)
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.parametrize("domain", ["phases", "positions", "projects", "roles"])
    def test_new_user_cannot_open_settings_pages(self, domain):
        response = httpx.get(f"{self.base_url}/settings/{domain}", params=self._params(), timeout=self.timeout)

        assert response.status_code == 403

    def test_settings_page_without_token_is_rejected(self):
        response = httpx.get(f"{self.base_url}/settings/roles", timeout=self.timeout)
        assert response.status_code == 401

    def test_new_user_cannot_manage_settings(self):
        response = httpx.post(
            f"{self.base_url}/settings/positions",
            params=self._params(),
            json={"name": "Foreman", "code": "FRM"},
            timeout=self.timeout,
        )
        assert response.status_code == 403

    def test_save_and_delete_calculation(self):
        saved = httpx.post(
            f"{self.base_url}/calculations",
            params=self._params(),
            json={"name": "Integration dinner", "bill": 100, "tip": 15, "people": 4},
            timeout=self.timeout,
        )
        assert saved.status_code == 201
        assert saved.json()["per_person_amount"] == 28.75

        listed = httpx.get(f"{self.base_url}/calculations", params=self._params(), timeout=self.timeout)
        assert saved.json()["id"] in [c["id"] for c in listed.json()]

        deleted = httpx.delete(
            f"{self.base_url}/calculations/{saved.json()['id']}",
            params=self._params(),
            timeout=self.timeout,
        )
        assert deleted.status_code == 204
