"""
Database module - MongoDB connection, store client and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from app.database.credentials import CredentialsError, ServiceAccount, parse_service_account
from app.database.databases import tipsplit_db
from app.database.store import DocumentStore, MongoDocumentStore

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "CredentialsError",
    "ServiceAccount",
    "parse_service_account",
    "tipsplit_db",
    "DocumentStore",
    "MongoDocumentStore",
]
