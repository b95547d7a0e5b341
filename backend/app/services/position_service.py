"""
Employee position manager.
"""
import logging

from app.database.databases.tipsplit_db import Collections
from app.database.store import DocumentStore
from app.models.position import EmployeePosition

logger = logging.getLogger(__name__)


class PositionService:
    """Service for employee position operations."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create(self, name: str, code: str) -> EmployeePosition:
        """
        Create a position. Codes are stored upper-case and must be unique.

        Raises:
            ValueError: If name or code is blank or the code is taken
        """
        name = name.strip()
        code = code.strip().upper()
        if not name or not code:
            raise ValueError("Position name and code cannot be empty.")

        if await self.store.count(Collections.EMPLOYEE_POSITIONS, {"code": code}):
            raise ValueError("A position with the same code already exists.")

        data = {"name": name, "code": code}
        position_id = await self.store.insert(Collections.EMPLOYEE_POSITIONS, data)
        logger.info(f"Created position {position_id} ({code})")
        return EmployeePosition(id=position_id, **data)

    async def delete(self, position_id: str) -> bool:
        deleted = await self.store.delete(Collections.EMPLOYEE_POSITIONS, position_id)
        if deleted:
            logger.info(f"Deleted position {position_id}")
        return deleted
