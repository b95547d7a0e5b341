"""
Role manager.

Permissions are normalized through the permission hierarchy on every
write. A role cannot be deleted while users still hold it.
"""
import logging
from typing import Iterable, Optional

from app.core.permissions import normalize_permissions
from app.database.databases.tipsplit_db import Collections
from app.database.store import DocumentStore
from app.models.role import Role

logger = logging.getLogger(__name__)


class RoleService:
    """Service for role operations."""

    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def _role_data(name: str, permissions: Iterable[str]) -> dict:
        name = name.strip()
        if not name:
            raise ValueError("Role name cannot be empty.")
        return {
            "name": name,
            "permissions": [p.value for p in normalize_permissions(permissions)],
        }

    async def create(self, name: str, permissions: Iterable[str]) -> Role:
        """
        Create a role.

        Raises:
            ValueError: If the name is blank
        """
        data = self._role_data(name, permissions)
        role_id = await self.store.insert(Collections.ROLES, data)
        logger.info(f"Created role {role_id} ({data['name']})")
        return Role(id=role_id, **data)

    async def update(self, role_id: str, name: str, permissions: Iterable[str]) -> Optional[Role]:
        """
        Replace a role's name and permissions.

        Returns:
            The updated role, or None if it does not exist
        """
        data = self._role_data(name, permissions)
        doc = await self.store.update(Collections.ROLES, role_id, data)
        if doc is None:
            return None
        logger.info(f"Updated role {role_id}")
        return Role(**doc)

    async def delete(self, role_id: str) -> bool:
        """
        Delete a role.

        Raises:
            ValueError: If users are still assigned to the role
        """
        assigned = await self.store.count(Collections.USERS, {"role_id": role_id})
        if assigned:
            raise ValueError(f"Cannot delete. {assigned} user(s) have this role assigned.")

        deleted = await self.store.delete(Collections.ROLES, role_id)
        if deleted:
            logger.info(f"Deleted role {role_id}")
        return deleted

    async def get(self, role_id: str) -> Optional[Role]:
        doc = await self.store.get(Collections.ROLES, role_id)
        return Role(**doc) if doc else None
