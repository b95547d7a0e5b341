"""
Authentication router for login, registration and current user info.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.database.store import DocumentStore
from app.dependencies.auth import get_current_active_user
from app.dependencies.permissions import get_user_permissions
from app.dependencies.store import get_store
from app.models.user import User
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserInfoResponse,
)
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


async def get_auth_service(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(store)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **email**: Valid email address (must be unique)
    - **password**: Password (minimum 6 characters)
    - **password_confirm**: Must match password
    """
    try:
        return await auth_service.register_user(body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.

    The token should be passed as a query parameter `token` to protected endpoints.
    """
    try:
        return await auth_service.login(body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.get(
    "/me",
    response_model=UserInfoResponse,
    summary="Get current user info",
)
async def get_current_user_info(
    current_user: Annotated[User, Depends(get_current_active_user)],
    store: Annotated[DocumentStore, Depends(get_store)],
):
    """
    Get information about the currently authenticated user, including the
    permissions granted by their role.

    Requires valid token as query parameter: `?token=xxx`
    """
    return UserInfoResponse(
        id=current_user.id,
        email=current_user.email,
        first_name=current_user.first_name,
        last_name=current_user.last_name,
        role_id=current_user.role_id,
        permissions=await get_user_permissions(current_user, store),
        is_superuser=current_user.is_superuser,
        status=current_user.status,
        created_at=current_user.created_at,
    )
