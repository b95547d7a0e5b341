"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.calculation_service import CalculationService, calculate_split
from app.services.phase_service import PhaseService
from app.services.position_service import PositionService
from app.services.project_service import ProjectService
from app.services.role_service import RoleService

__all__ = [
    "AuthService",
    "CalculationService",
    "calculate_split",
    "PhaseService",
    "PositionService",
    "ProjectService",
    "RoleService",
]
