"""
TipSplit database configuration.
Stores settings entities, users and saved bill-split calculations.
"""

DB_NAME = "tipsplit_db"


class Collections:
    """Collection names in tipsplit_db."""
    PHASES = "phases"
    EMPLOYEE_POSITIONS = "employee-positions"
    PROJECTS = "projects"
    ROLES = "roles"
    USERS = "users"
    SAVED_CALCULATIONS = "saved-calculations"

    # Index definitions for each collection
    INDEXES = {
        "phases": [
            {"keys": [("project_id", 1), ("name", 1)], "unique": True},
        ],
        "employee-positions": [
            {"keys": [("code", 1)], "unique": True},
        ],
        "projects": [
            {"keys": [("identifier", 1)], "unique": True},
        ],
        "users": [
            {"keys": [("email", 1)], "unique": True},
            {"keys": [("role_id", 1)]},
        ],
        "saved-calculations": [
            {"keys": [("user_id", 1), ("created_at", -1)]},
        ],
    }
