"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import get_settings
from app.database.credentials import parse_service_account

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """
    Get or create MongoDB client.

    Uses the service-account payload when one is configured, otherwise
    the ambient mongo_uri.

    Raises:
        CredentialsError: If the service-account payload is malformed
    """
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        service_account = parse_service_account(settings.service_account_key)
        if service_account is not None:
            _mongo_client = AsyncIOMotorClient(
                service_account.uri,
                **service_account.client_kwargs(),
            )
        else:
            logger.info("Initializing MongoDB client with ambient default credentials.")
            _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    return _mongo_client


async def close_connections():
    """Close all database connections."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def get_database(db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """Get a MongoDB database by name (defaults to the configured one)."""
    client = await get_mongo_client()
    return client[db_name or get_settings().mongo_db_name]
