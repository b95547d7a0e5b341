"""
API Routers module.
"""
from app.routers import auth, calculations, health, phases, positions, projects, roles

__all__ = ["auth", "calculations", "health", "phases", "positions", "projects", "roles"]
