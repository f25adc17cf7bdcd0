"""
User Management DTOs
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.auth.dtos import UserProfile


class CreateUserCommand(BaseModel):
    name: str
    username: str
    email: str
    password: str
    role_id: UUID


class UpdateUserCommand(BaseModel):
    """Admin edit; the password is deliberately not part of it"""

    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    role_id: Optional[UUID] = None
    is_active: Optional[bool] = None


class UserEnvelope(BaseModel):
    user: UserProfile


class UserListResponse(BaseModel):
    users: List[UserProfile]
