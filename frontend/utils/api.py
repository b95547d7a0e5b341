from typing import Optional

import requests
import streamlit as st


class APIClient:
    """Simple API client for backend requests."""

    def __init__(self, base_url: str):
        self.base_url = base_url

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _params(self, params: Optional[dict] = None) -> dict:
        """Query params with the auth token added when logged in."""
        params = dict(params or {})
        token = st.session_state.get("token")
        if token:
            params["token"] = token
        return params

    def _parse_json(self, resp) -> Optional[dict]:
        """Safely parse JSON, return None or text on failure."""
        try:
            if resp is None:
                return None
            if not resp.text:
                return None
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _request(
        self,
        method: str,
        endpoint: str,
        data: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> dict:
        """Make a request and wrap the outcome as {"status", "data"} or {"status": 0, "error"}."""
        try:
            resp = requests.request(
                method,
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                json=data,
                params=self._params(params),
                timeout=30,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        return self._request("GET", endpoint, params=params)

    def _post(self, endpoint: str, data: dict) -> dict:
        return self._request("POST", endpoint, data=data)

    def _patch(self, endpoint: str, data: dict) -> dict:
        return self._request("PATCH", endpoint, data=data)

    def _put(self, endpoint: str, data: dict) -> dict:
        return self._request("PUT", endpoint, data=data)

    def _delete(self, endpoint: str) -> dict:
        return self._request("DELETE", endpoint)

    # Root / health
    def get_branding(self) -> dict:
        return self._get("/")

    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")

    # Auth endpoints
    def login(self, email: str, password: str) -> dict:
        """Login and get token."""
        return self._post("/auth/login", {
            "email": email,
            "password": password,
        })

    def register(self, email: str, password: str, first_name: str = "", last_name: str = "") -> dict:
        """Register new user."""
        return self._post("/auth/register", {
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "password": password,
            "password_confirm": password,
        })

    def get_me(self) -> dict:
        """Get current user profile."""
        return self._get("/auth/me")

    # Settings pages
    def get_settings_page(self, domain: str) -> dict:
        """Load a settings page: phases, positions, projects or roles."""
        return self._get(f"/settings/{domain}")

    def create_phase(self, project_id: str, name: str, pep_element: str) -> dict:
        return self._post("/settings/phases", {
            "project_id": project_id,
            "name": name,
            "pep_element": pep_element,
        })

    def delete_phase(self, phase_id: str) -> dict:
        return self._delete(f"/settings/phases/{phase_id}")

    def create_position(self, name: str, code: str) -> dict:
        return self._post("/settings/positions", {"name": name, "code": code})

    def delete_position(self, position_id: str) -> dict:
        return self._delete(f"/settings/positions/{position_id}")

    def create_project(self, project: dict) -> dict:
        return self._post("/settings/projects", project)

    def update_project(self, project_id: str, changes: dict) -> dict:
        return self._patch(f"/settings/projects/{project_id}", changes)

    def delete_project(self, project_id: str) -> dict:
        return self._delete(f"/settings/projects/{project_id}")

    def get_permission_groups(self) -> dict:
        return self._get("/settings/roles/permissions")

    def toggle_permission(self, current: list[str], key: str, checked: bool) -> dict:
        """Resolve a checkbox toggle to the full permission list."""
        return self._post("/settings/roles/permissions/toggle", {
            "current": current,
            "key": key,
            "checked": checked,
        })

    def create_role(self, name: str, permissions: list[str]) -> dict:
        return self._post("/settings/roles", {"name": name, "permissions": permissions})

    def update_role(self, role_id: str, name: str, permissions: list[str]) -> dict:
        return self._put(f"/settings/roles/{role_id}", {"name": name, "permissions": permissions})

    def delete_role(self, role_id: str) -> dict:
        return self._delete(f"/settings/roles/{role_id}")

    # Calculations
    def preview_calculation(self, bill: float, tip: float, people: int) -> dict:
        return self._post("/calculations/preview", {"bill": bill, "tip": tip, "people": people})

    def list_calculations(self) -> dict:
        """List the user's saved calculations."""
        return self._get("/calculations")

    def save_calculation(self, name: str, bill: float, tip: float, people: int) -> dict:
        return self._post("/calculations", {
            "name": name,
            "bill": bill,
            "tip": tip,
            "people": people,
        })

    def delete_calculation(self, calculation_id: str) -> dict:
        return self._delete(f"/calculations/{calculation_id}")


def error_message(result: dict, default: str) -> str:
    """Best error text from an API result."""
    data = result.get("data") or {}
    if isinstance(data, dict) and data.get("detail"):
        detail = data["detail"]
        if isinstance(detail, list):
            return "; ".join(d.get("msg", str(d)) for d in detail)
        return str(detail)
    return result.get("error", default)
