"""
Role model for the roles collection.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PermissionKey(str, Enum):
    """Permission keys a role can grant."""
    DASHBOARD = "dashboard"
    CREWS = "crews"
    CREWS_VIEW = "crews.view"
    CREWS_EDIT_INFO = "crews.editInfo"
    CREWS_ASSIGN_PHASE = "crews.assignPhase"
    CREWS_MANAGE_PERSONNEL = "crews.managePersonnel"
    EMPLOYEES = "employees"
    EMPLOYEES_VIEW = "employees.view"
    EMPLOYEES_MANAGE = "employees.manage"
    USERS = "users"
    ATTENDANCE = "attendance"
    DAILY_REPORTS = "dailyReports"
    DAILY_REPORTS_VIEW = "dailyReports.view"
    DAILY_REPORTS_SAVE = "dailyReports.save"
    DAILY_REPORTS_NOTIFY = "dailyReports.notify"
    DAILY_REPORTS_ADD_MANUAL = "dailyReports.addManual"
    DAILY_REPORTS_MOVE_EMPLOYEE = "dailyReports.moveEmployee"
    DAILY_REPORTS_DELETE = "dailyReports.delete"
    DAILY_REPORTS_APPROVE_CONTROL = "dailyReports.approveControl"
    DAILY_REPORTS_APPROVE_PM = "dailyReports.approvePM"
    STATISTICS = "statistics"
    PERMISSIONS = "permissions"
    PERMISSIONS_VIEW = "permissions.view"
    PERMISSIONS_MANAGE = "permissions.manage"
    PERMISSIONS_APPROVE_SUPERVISOR = "permissions.approveSupervisor"
    PERMISSIONS_APPROVE_HR = "permissions.approveHR"
    SETTINGS = "settings"
    SETTINGS_PROJECTS = "settings.projects"
    SETTINGS_ABSENCE_TYPES = "settings.absenceTypes"
    SETTINGS_PHASES = "settings.phases"
    SETTINGS_POSITIONS = "settings.positions"
    SETTINGS_SPECIAL_HOUR_TYPES = "settings.specialHourTypes"
    SETTINGS_UNPRODUCTIVE_HOUR_TYPES = "settings.unproductiveHourTypes"
    SETTINGS_ROLES = "settings.roles"


class Role(BaseModel):
    """
    Role document model for MongoDB tipsplit_db.roles collection.
    """
    id: Optional[str] = Field(None, description="Store-assigned role ID")
    name: str = Field(..., min_length=1, description="Role name")
    permissions: list[PermissionKey] = Field(
        default_factory=list,
        description="Permissions granted by this role"
    )

    class Config:
        use_enum_values = True
