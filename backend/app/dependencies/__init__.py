"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import get_current_user, get_current_active_user
from app.dependencies.permissions import require_permission
from app.dependencies.store import get_session, get_store

__all__ = [
    "get_current_user",
    "get_current_active_user",
    "require_permission",
    "get_session",
    "get_store",
]
