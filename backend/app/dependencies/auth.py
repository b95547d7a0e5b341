"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Query, status
from jose import JWTError

from app.core.security import decode_token
from app.database.store import DocumentStore
from app.dependencies.store import get_store
from app.models.user import User, UserStatus
from app.services.auth_service import AuthService


async def get_current_user(
    store: Annotated[DocumentStore, Depends(get_store)],
    token: Annotated[Optional[str], Query(description="JWT access token")] = None,
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.

    Token is passed as query parameter: ?token=xxx

    Raises:
        HTTPException 401: If token is missing, invalid or expired
        HTTPException 401: If user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        raise credentials_exception

    try:
        payload = decode_token(token)
    except JWTError:
        raise credentials_exception

    user_id = payload.get("sub")
    if user_id is None:
        raise credentials_exception

    user = await AuthService(store).get_user_by_id(user_id)
    if user is None:
        raise credentials_exception

    return user


async def get_current_active_user(
    current_user: Annotated[User, Depends(get_current_user)]
) -> User:
    """
    Dependency to ensure the current user is active (not disabled).

    Raises:
        HTTPException 403: If user account is disabled
    """
    if current_user.status == UserStatus.DISABLED.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is disabled",
        )
    return current_user


# Type alias for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_active_user)]
