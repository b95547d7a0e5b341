"""
Phase manager: create, list and delete phases of a project.
"""
import logging
from typing import Optional

from app.database.databases.tipsplit_db import Collections
from app.database.store import DocumentStore
from app.models.phase import Phase

logger = logging.getLogger(__name__)


class PhaseService:
    """Service for phase operations."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_for_project(self, project_id: str) -> list[Phase]:
        """Phases of one project, sorted by name."""
        docs = await self.store.find(Collections.PHASES, {"project_id": project_id})
        phases = [Phase(**d) for d in docs]
        return sorted(phases, key=lambda p: p.name.lower())

    async def create(self, project_id: Optional[str], name: str, pep_element: str) -> Phase:
        """
        Create a phase in a project.

        Raises:
            ValueError: If a field is blank, the project does not exist, or
                the project already has a phase with this name
        """
        name = name.strip()
        pep_element = pep_element.strip().upper()
        if not project_id or not name or not pep_element:
            raise ValueError("A project, a phase name and a PEP element are required.")

        if await self.store.get(Collections.PROJECTS, project_id) is None:
            raise ValueError("Project not found.")

        existing = await self.store.count(
            Collections.PHASES, {"name": name, "project_id": project_id}
        )
        if existing:
            raise ValueError("A phase with the same name already exists in this project.")

        data = {"name": name, "pep_element": pep_element, "project_id": project_id}
        phase_id = await self.store.insert(Collections.PHASES, data)
        logger.info(f"Created phase {phase_id} in project {project_id}")
        return Phase(id=phase_id, **data)

    async def delete(self, phase_id: str) -> bool:
        deleted = await self.store.delete(Collections.PHASES, phase_id)
        if deleted:
            logger.info(f"Deleted phase {phase_id}")
        return deleted
