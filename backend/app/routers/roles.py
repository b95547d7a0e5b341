"""
Roles settings router.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.core.permissions import PERMISSION_GROUPS, PermissionDefinition, toggle_permission
from app.database.store import DocumentStore
from app.dependencies.auth import get_current_active_user
from app.dependencies.permissions import SettingsSession, require_permission
from app.dependencies.store import get_store
from app.loaders.pages import roles_page
from app.models.role import PermissionKey, Role
from app.models.user import User
from app.routers.common import bad_request, not_found, render_page
from app.schemas.settings import (
    PageResponse,
    PermissionDefinitionResponse,
    PermissionGroupResponse,
    PermissionToggleRequest,
    RoleWrite,
)
from app.services.role_service import RoleService

router = APIRouter(prefix="/settings/roles", tags=["Roles"])

CanManageRoles = Annotated[User, Depends(require_permission(PermissionKey.SETTINGS_ROLES))]


async def get_role_service(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> RoleService:
    """Dependency to get RoleService instance."""
    return RoleService(store)


def _definition_response(definition: PermissionDefinition) -> PermissionDefinitionResponse:
    return PermissionDefinitionResponse(
        key=definition.key.value,
        label=definition.label,
        sub_permissions=[_definition_response(sp) for sp in definition.sub_permissions],
    )


@router.get("", response_model=PageResponse, summary="Roles page")
async def get_roles_page(
    session: SettingsSession,
    store: Annotated[DocumentStore, Depends(get_store)],
):
    """
    Load all roles.

    Requires valid token as query parameter: `?token=xxx`
    and at least one settings permission (403 otherwise).
    """
    return await render_page(roles_page(session, store))


@router.get(
    "/permissions",
    response_model=list[PermissionGroupResponse],
    summary="Permission hierarchy",
)
async def get_permission_groups(
    current_user: Annotated[User, Depends(get_current_active_user)],
):
    """Permission groups with their sub-permissions, for the role editor."""
    return [
        PermissionGroupResponse(
            category=group.category,
            permissions=[_definition_response(d) for d in group.permissions],
        )
        for group in PERMISSION_GROUPS
    ]


@router.post(
    "/permissions/toggle",
    response_model=list[str],
    summary="Toggle a permission",
)
async def toggle_role_permission(
    body: PermissionToggleRequest,
    current_user: Annotated[User, Depends(get_current_active_user)],
):
    """
    Check or uncheck a permission in the role editor, cascading to its
    parent or sub-permissions.
    """
    try:
        permissions = toggle_permission(body.current, body.key, body.checked)
    except ValueError:
        raise bad_request(ValueError(f"Unknown permission: {body.key}"))
    return [p.value for p in permissions]


@router.post(
    "",
    response_model=Role,
    status_code=status.HTTP_201_CREATED,
    summary="Create role",
)
async def create_role(
    body: RoleWrite,
    current_user: CanManageRoles,
    role_service: RoleService = Depends(get_role_service),
):
    try:
        return await role_service.create(body.name, body.permissions)
    except ValueError as e:
        raise bad_request(e)


@router.put(
    "/{role_id}",
    response_model=Role,
    summary="Update role",
)
async def update_role(
    role_id: str,
    body: RoleWrite,
    current_user: CanManageRoles,
    role_service: RoleService = Depends(get_role_service),
):
    """Replace a role's name and permissions."""
    try:
        role = await role_service.update(role_id, body.name, body.permissions)
    except ValueError as e:
        raise bad_request(e)

    if not role:
        raise not_found("Role")

    return role


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete role",
)
async def delete_role(
    role_id: str,
    current_user: CanManageRoles,
    role_service: RoleService = Depends(get_role_service),
):
    """
    Delete a role.

    Refused with 400 while users are still assigned to it.
    """
    try:
        deleted = await role_service.delete(role_id)
    except ValueError as e:
        raise bad_request(e)

    if not deleted:
        raise not_found("Role")
