"""
Authentication service for user management and login.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from app.config import get_settings
from app.core.security import create_access_token, hash_password, verify_password
from app.database.databases.tipsplit_db import Collections
from app.database.store import DocumentStore
from app.models.user import User, UserStatus
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, store: DocumentStore):
        """Initialize with the document store."""
        self.store = store
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        Args:
            request: Registration request with email, names and password

        Returns:
            RegisterResponse with created user ID

        Raises:
            ValueError: If passwords don't match or email exists
        """
        if not request.passwords_match():
            raise ValueError("Passwords do not match")

        email = request.email.lower()
        if await self.store.count(Collections.USERS, {"email": email}):
            raise ValueError("Email already registered")

        user_doc = {
            "email": email,
            "hashed_password": hash_password(request.password),
            "first_name": request.first_name.strip(),
            "last_name": request.last_name.strip(),
            "role_id": None,
            "is_superuser": False,
            "status": UserStatus.ACTIVE.value,
            "created_at": datetime.now(timezone.utc),
        }

        user_id = await self.store.insert(Collections.USERS, user_doc)
        logger.info(f"Registered user {user_id}")

        return RegisterResponse(
            user_id=user_id,
            email=email,
            message="Registration successful"
        )

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Raises:
            ValueError: If credentials are invalid or account is disabled
        """
        users = await self.store.find(Collections.USERS, {"email": request.email.lower()})
        if not users:
            raise ValueError("Invalid email or password")

        user_doc = users[0]

        if user_doc.get("status") == UserStatus.DISABLED.value:
            raise ValueError("Account is disabled")

        if not verify_password(request.password, user_doc["hashed_password"]):
            raise ValueError("Invalid email or password")

        return LoginResponse(
            access_token=create_access_token(user_id=user_doc["id"]),
            token_type="bearer",
            expires_in=self.settings.jwt_access_token_expire_minutes * 60,
            user_id=user_doc["id"],
        )

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User model or None if not found
        """
        user_doc = await self.store.get(Collections.USERS, user_id)
        if not user_doc:
            return None
        return User(**user_doc)
