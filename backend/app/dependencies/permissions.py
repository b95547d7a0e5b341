"""
Permission-based access control dependencies.
"""
from typing import Annotated, Callable

from fastapi import Depends, HTTPException, status

from app.core.session import SessionProvider
from app.database.store import DocumentStore
from app.dependencies.auth import get_current_active_user
from app.dependencies.store import get_session, get_store
from app.models.role import PermissionKey
from app.models.user import User
from app.services.role_service import RoleService


async def get_user_permissions(user: User, store: DocumentStore) -> list[str]:
    """Permissions granted to a user through their role."""
    if not user.role_id:
        return []
    role = await RoleService(store).get(user.role_id)
    return list(role.permissions) if role else []


def require_permission(permission: PermissionKey) -> Callable:
    """
    Dependency factory for permission-based access control.

    Usage:
        @router.post("/settings/roles")
        async def create_role(user: User = Depends(require_permission(PermissionKey.SETTINGS_ROLES))):
            ...

    Superusers pass every check.
    """
    async def permission_checker(
        current_user: Annotated[User, Depends(get_current_active_user)],
        store: Annotated[DocumentStore, Depends(get_store)],
    ) -> User:
        if current_user.is_superuser:
            return current_user

        granted = await get_user_permissions(current_user, store)
        if permission.value not in granted:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )

        return current_user

    return permission_checker


# Any one of these opens the settings area.
SETTINGS_ACCESS = (
    PermissionKey.SETTINGS_PROJECTS,
    PermissionKey.SETTINGS_ABSENCE_TYPES,
    PermissionKey.SETTINGS_PHASES,
    PermissionKey.SETTINGS_POSITIONS,
    PermissionKey.SETTINGS_SPECIAL_HOUR_TYPES,
    PermissionKey.SETTINGS_UNPRODUCTIVE_HOUR_TYPES,
    PermissionKey.SETTINGS_ROLES,
)


def require_any_permission(*permissions: PermissionKey) -> Callable:
    """
    Dependency factory for page access: the caller needs at least one of
    `permissions`.

    Resolves the session first. A session with no user passes through so
    the page loader reports it as unauthenticated (401); a signed-in user
    without access gets 403. Superusers pass every check.
    """
    async def access_checker(
        session: Annotated[SessionProvider, Depends(get_session)],
        store: Annotated[DocumentStore, Depends(get_store)],
    ) -> SessionProvider:
        resolved = await session.wait_until_resolved()
        user = resolved.user
        if user is None or user.is_superuser:
            return session

        granted = await get_user_permissions(user, store)
        if not any(p.value in granted for p in permissions):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )

        return session

    return access_checker


SettingsSession = Annotated[SessionProvider, Depends(require_any_permission(*SETTINGS_ACCESS))]
