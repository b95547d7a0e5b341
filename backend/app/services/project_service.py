"""
Project manager for project settings.
"""
import logging
from typing import Optional

from app.database.databases.tipsplit_db import Collections
from app.database.store import DocumentStore
from app.models.project import Project
from app.schemas.settings import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for project operations."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def _identifier_taken(self, identifier: str, exclude_id: Optional[str] = None) -> bool:
        matches = await self.store.find(Collections.PROJECTS, {"identifier": identifier})
        return any(m["id"] != exclude_id for m in matches)

    async def create(self, request: ProjectCreate) -> Project:
        """
        Create a project. Identifiers are stored upper-case and must be unique.

        Raises:
            ValueError: If name or identifier is blank or the identifier is taken
        """
        name = request.name.strip()
        identifier = request.identifier.strip().upper()
        if not name or not identifier:
            raise ValueError("Project name and identifier cannot be empty.")

        if await self._identifier_taken(identifier):
            raise ValueError("A project with the same identifier already exists.")

        data = {
            "name": name,
            "identifier": identifier,
            "requires_control_approval": request.requires_control_approval,
            "requires_site_manager_approval": request.requires_site_manager_approval,
            "special_hour_type_ids": list(request.special_hour_type_ids),
            "unproductive_hour_type_ids": list(request.unproductive_hour_type_ids),
            "absence_type_ids": list(request.absence_type_ids),
        }
        project_id = await self.store.insert(Collections.PROJECTS, data)
        logger.info(f"Created project {project_id} ({identifier})")
        return Project(id=project_id, **data)

    async def update(self, project_id: str, request: ProjectUpdate) -> Optional[Project]:
        """
        Update a project.

        Returns:
            The updated project, or None if it does not exist

        Raises:
            ValueError: If name or identifier would become blank, or the new
                identifier belongs to another project
        """
        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        if "name" in changes:
            changes["name"] = changes["name"].strip()
            if not changes["name"]:
                raise ValueError("Project name and identifier cannot be empty.")

        if "identifier" in changes:
            changes["identifier"] = changes["identifier"].strip().upper()
            if not changes["identifier"]:
                raise ValueError("Project name and identifier cannot be empty.")
            if await self._identifier_taken(changes["identifier"], exclude_id=project_id):
                raise ValueError("A project with the same identifier already exists.")

        doc = await self.store.update(Collections.PROJECTS, project_id, changes)
        if doc is None:
            return None
        logger.info(f"Updated project {project_id}")
        return Project(**doc)

    async def delete(self, project_id: str) -> bool:
        deleted = await self.store.delete(Collections.PROJECTS, project_id)
        if deleted:
            logger.info(f"Deleted project {project_id}")
        return deleted
