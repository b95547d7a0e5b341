"""
Service-account credentials for privileged database access.
"""
import json
from dataclasses import dataclass
from typing import Optional


class CredentialsError(Exception):
    """Raised when the service-account payload cannot be used."""


@dataclass(frozen=True)
class ServiceAccount:
    """Connection credentials parsed from the service-account payload."""
    uri: str
    username: Optional[str] = None
    password: Optional[str] = None
    auth_source: Optional[str] = None

    def client_kwargs(self) -> dict:
        """Keyword arguments for the motor client."""
        kwargs = {}
        if self.username:
            kwargs["username"] = self.username
        if self.password:
            kwargs["password"] = self.password
        if self.auth_source:
            kwargs["authSource"] = self.auth_source
        return kwargs


def parse_service_account(payload: Optional[str]) -> Optional[ServiceAccount]:
    """
    Parse a JSON service-account payload.

    Args:
        payload: Raw JSON string, usually from SERVICE_ACCOUNT_KEY

    Returns:
        ServiceAccount, or None when no payload is configured

    Raises:
        CredentialsError: If the payload is not a JSON object with a "uri"
    """
    if payload is None or not payload.strip():
        return None

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise CredentialsError(f"Service account payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CredentialsError("Service account payload must be a JSON object")

    uri = data.get("uri")
    if not isinstance(uri, str) or not uri:
        raise CredentialsError("Service account payload is missing 'uri'")

    return ServiceAccount(
        uri=uri,
        username=data.get("username"),
        password=data.get("password"),
        auth_source=data.get("auth_source"),
    )
