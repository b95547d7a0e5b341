"""
Pydantic models for database documents and data structures.
"""
from app.models.user import User, UserStatus
from app.models.role import Role, PermissionKey
from app.models.phase import Phase
from app.models.position import EmployeePosition
from app.models.project import Project
from app.models.calculation import SavedCalculation

__all__ = [
    "User",
    "UserStatus",
    "Role",
    "PermissionKey",
    "Phase",
    "EmployeePosition",
    "Project",
    "SavedCalculation",
]
