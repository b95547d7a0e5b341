"""
Permission hierarchy for roles.

Permissions are grouped by category. A top-level permission may own
sub-permissions: a sub-permission is never granted without its parent.
"""
from dataclasses import dataclass, field
from typing import Iterable

from app.models.role import PermissionKey as P


@dataclass(frozen=True)
class PermissionDefinition:
    key: P
    label: str
    sub_permissions: tuple["PermissionDefinition", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PermissionGroup:
    category: str
    permissions: tuple[PermissionDefinition, ...]


PERMISSION_GROUPS: tuple[PermissionGroup, ...] = (
    PermissionGroup("General access", (
        PermissionDefinition(P.DASHBOARD, "Dashboard access"),
        PermissionDefinition(P.USERS, "User management"),
        PermissionDefinition(P.ATTENDANCE, "Attendance management"),
        PermissionDefinition(P.STATISTICS, "Statistics access"),
    )),
    PermissionGroup("Crews", (
        PermissionDefinition(P.CREWS, "Crews access", (
            PermissionDefinition(P.CREWS_VIEW, "View crews"),
            PermissionDefinition(P.CREWS_EDIT_INFO, "Edit crew details"),
            PermissionDefinition(P.CREWS_ASSIGN_PHASE, "Assign phases"),
            PermissionDefinition(P.CREWS_MANAGE_PERSONNEL, "Add/remove personnel"),
        )),
    )),
    PermissionGroup("Employees", (
        PermissionDefinition(P.EMPLOYEES, "Employees access", (
            PermissionDefinition(P.EMPLOYEES_VIEW, "View employees"),
            PermissionDefinition(P.EMPLOYEES_MANAGE, "Manage employees"),
        )),
    )),
    PermissionGroup("Absences", (
        PermissionDefinition(P.PERMISSIONS, "Absences access", (
            PermissionDefinition(P.PERMISSIONS_VIEW, "View absences"),
            PermissionDefinition(P.PERMISSIONS_MANAGE, "Manage absences"),
            PermissionDefinition(P.PERMISSIONS_APPROVE_SUPERVISOR, "Approve (supervisor)"),
            PermissionDefinition(P.PERMISSIONS_APPROVE_HR, "Approve (HR)"),
        )),
    )),
    PermissionGroup("Daily reports", (
        PermissionDefinition(P.DAILY_REPORTS, "Daily reports access", (
            PermissionDefinition(P.DAILY_REPORTS_VIEW, "View daily reports"),
            PermissionDefinition(P.DAILY_REPORTS_SAVE, "Save report"),
            PermissionDefinition(P.DAILY_REPORTS_NOTIFY, "Notify report"),
            PermissionDefinition(P.DAILY_REPORTS_ADD_MANUAL, "Add personnel manually"),
            PermissionDefinition(P.DAILY_REPORTS_MOVE_EMPLOYEE, "Move personnel"),
            PermissionDefinition(P.DAILY_REPORTS_DELETE, "Delete daily report"),
            PermissionDefinition(P.DAILY_REPORTS_APPROVE_CONTROL, "Approve (management control)"),
            PermissionDefinition(P.DAILY_REPORTS_APPROVE_PM, "Approve (site manager)"),
        )),
    )),
    PermissionGroup("Settings", (
        PermissionDefinition(P.SETTINGS, "Settings access", (
            PermissionDefinition(P.SETTINGS_PROJECTS, "Manage projects"),
            PermissionDefinition(P.SETTINGS_PHASES, "Manage phases"),
            PermissionDefinition(P.SETTINGS_POSITIONS, "Manage positions"),
            PermissionDefinition(P.SETTINGS_ABSENCE_TYPES, "Manage absence types"),
            PermissionDefinition(P.SETTINGS_SPECIAL_HOUR_TYPES, "Manage special hour types"),
            PermissionDefinition(P.SETTINGS_UNPRODUCTIVE_HOUR_TYPES, "Manage unproductive hour types"),
            PermissionDefinition(P.SETTINGS_ROLES, "Manage roles"),
        )),
    )),
)

# Declaration order, parents before their children
ALL_PERMISSIONS: tuple[P, ...] = tuple(
    key
    for group in PERMISSION_GROUPS
    for definition in group.permissions
    for key in (definition.key, *(sp.key for sp in definition.sub_permissions))
)

CHILDREN: dict[P, tuple[P, ...]] = {
    definition.key: tuple(sp.key for sp in definition.sub_permissions)
    for group in PERMISSION_GROUPS
    for definition in group.permissions
    if definition.sub_permissions
}

PARENT: dict[P, P] = {
    child: parent for parent, children in CHILDREN.items() for child in children
}


def _ordered(keys: set[P]) -> list[P]:
    return [key for key in ALL_PERMISSIONS if key in keys]


def normalize_permissions(keys: Iterable[str]) -> list[P]:
    """
    Clean a permission list before it is stored.

    Unknown keys are dropped, duplicates removed, and the parent of every
    present sub-permission is added. The result follows declaration order.
    """
    present: set[P] = set()
    for raw in keys:
        try:
            key = P(raw)
        except ValueError:
            continue
        present.add(key)
        if key in PARENT:
            present.add(PARENT[key])
    return _ordered(present)


def toggle_permission(current: Iterable[str], key: str, checked: bool) -> list[P]:
    """
    Check or uncheck one permission, cascading through the hierarchy.

    Checking a sub-permission also checks its parent; checking a parent
    checks all of its sub-permissions. Unchecking a parent unchecks its
    sub-permissions.

    Raises:
        ValueError: If key is not a known permission
    """
    target = P(key)
    present = set(normalize_permissions(current))

    if checked:
        present.add(target)
        if target in PARENT:
            present.add(PARENT[target])
        present.update(CHILDREN.get(target, ()))
    else:
        present.discard(target)
        for child in CHILDREN.get(target, ()):
            present.discard(child)

    return _ordered(present)
