"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated registration intent"""

    name: str
    username: str
    email: str
    password: str
    role_name: Optional[str] = None


class UpdateProfileCommand(BaseModel):
    """Profile fields to change; None leaves a field untouched"""

    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserProfile(BaseModel):
    """Non-sensitive view of a user account"""

    id: str
    name: str
    username: str
    email: str
    role: str
    role_id: Optional[str] = None
    is_active: bool
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            name=user.name,
            username=user.username,
            email=user.email,
            role=user.role,
            role_id=str(user.role_id) if user.role_id else None,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Response for register and login"""

    message: str
    user: UserProfile
    token: str


class ProfileResponse(BaseModel):
    """Response for profile reads and updates"""

    message: Optional[str] = None
    user: UserProfile


class MessageResponse(BaseModel):
    """Plain acknowledgement"""

    message: str


class VerifyResetTokenResponse(BaseModel):
    """Response for reset token verification"""

    valid: bool
    message: str
