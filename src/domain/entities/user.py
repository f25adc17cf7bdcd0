"""
User Entity

Represents an account holder of the institute website.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity.

    Business Rules:
    - Email and username are unique across all users
    - Password stored as bcrypt hash, never serialized
    - role is a denormalized copy of the referenced Role.name
    - Deactivated users cannot log in
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role_id: UUID = Field(foreign_key="roles.id")
    role: str = Field(max_length=50)

    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_role", "role"),)
