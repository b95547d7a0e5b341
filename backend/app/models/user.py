"""
User model for the users collection.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserStatus(str, Enum):
    """User account status."""
    ACTIVE = "active"
    DISABLED = "disabled"


class User(BaseModel):
    """
    User document model for MongoDB tipsplit_db.users collection.
    """
    id: Optional[str] = Field(None, description="Store-assigned user ID")
    email: EmailStr = Field(..., description="Unique email address")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    role_id: Optional[str] = Field(None, description="Assigned role ID")
    is_superuser: bool = Field(
        default=False,
        description="Superusers bypass role permission checks"
    )
    status: UserStatus = Field(
        default=UserStatus.ACTIVE,
        description="Account status"
    )
    created_at: Optional[datetime] = Field(
        None,
        description="Account creation timestamp"
    )

    class Config:
        use_enum_values = True
