"""
Core module - Security, sessions and the permission hierarchy.
"""
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from app.core.permissions import (
    PERMISSION_GROUPS,
    normalize_permissions,
    toggle_permission,
)
from app.core.session import (
    AuthSession,
    ResolvedSession,
    SessionProvider,
    TokenSession,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "PERMISSION_GROUPS",
    "normalize_permissions",
    "toggle_permission",
    "AuthSession",
    "ResolvedSession",
    "SessionProvider",
    "TokenSession",
]
