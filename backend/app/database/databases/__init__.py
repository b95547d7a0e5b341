"""
Database definitions and collection constants.
"""
from app.database.databases import tipsplit_db

__all__ = ["tipsplit_db"]
