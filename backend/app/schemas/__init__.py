"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserInfoResponse,
)
from app.schemas.calculation import CalculationCreate, CalculationInput, CalculationPreview
from app.schemas.settings import (
    PageResponse,
    PhaseCreate,
    PositionCreate,
    ProjectCreate,
    ProjectUpdate,
    RoleWrite,
    PermissionToggleRequest,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserInfoResponse",
    # Calculations
    "CalculationCreate",
    "CalculationInput",
    "CalculationPreview",
    # Settings
    "PageResponse",
    "PhaseCreate",
    "PositionCreate",
    "ProjectCreate",
    "ProjectUpdate",
    "RoleWrite",
    "PermissionToggleRequest",
]
