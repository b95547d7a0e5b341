"""
Store and session dependencies.
"""
from typing import Annotated, Optional

from fastapi import Depends, Query

from app.core.session import TokenSession
from app.database.connections import get_database
from app.database.store import DocumentStore, MongoDocumentStore
from app.services.auth_service import AuthService


async def get_store() -> DocumentStore:
    """Dependency to get the document store."""
    db = await get_database()
    return MongoDocumentStore(db)


async def get_session(
    store: Annotated[DocumentStore, Depends(get_store)],
    token: Annotated[Optional[str], Query(description="JWT access token")] = None,
) -> TokenSession:
    """
    Dependency to get the caller's session.

    Unlike get_current_user this never rejects: a missing or bad token
    yields a session that resolves to no user.
    """
    auth_service = AuthService(store)
    return TokenSession(token, auth_service.get_user_by_id)
