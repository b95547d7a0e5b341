"""
Index management.
Ensures every collection has its indexes on startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.database.databases import tipsplit_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for all tipsplit_db collections."""
    for collection_name, indexes in tipsplit_db.Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except PyMongoError as e:
                # Index might already exist with different options
                logger.debug(f"Index exists or error on {collection_name}: {e}")
