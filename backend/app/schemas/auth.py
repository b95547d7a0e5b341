"""
Authentication request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.user import UserStatus


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")
    user_id: str = Field(..., description="Authenticated user ID")


class RegisterRequest(BaseModel):
    """Registration request body."""
    email: EmailStr = Field(..., description="User email address")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    password: str = Field(
        ...,
        min_length=6,
        description="User password (min 6 characters)"
    )
    password_confirm: str = Field(..., description="Password confirmation")

    def passwords_match(self) -> bool:
        """Check if password and confirmation match."""
        return self.password == self.password_confirm


class RegisterResponse(BaseModel):
    """Registration response."""
    user_id: str = Field(..., description="Created user ID")
    email: str = Field(..., description="Registered email")
    message: str = Field(
        default="Registration successful",
        description="Success message"
    )


class UserInfoResponse(BaseModel):
    """Current user information response."""
    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    first_name: str
    last_name: str
    role_id: Optional[str] = None
    permissions: list[str] = Field(default_factory=list, description="Permissions of the user's role")
    is_superuser: bool = False
    status: UserStatus = Field(..., description="Account status")
    created_at: Optional[datetime] = None
