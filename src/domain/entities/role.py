"""
Role Entity

Named permission sets assigned to users.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Role(SQLModel, table=True):
    """
    Role entity - a named set of permissions.

    Business Rules:
    - Name is unique and stored lower-case
    - Seeded at startup (admin, user, editor, viewer)
    - is_default marks the roles new accounts may fall back to
    """

    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=50)
    description: Optional[str] = Field(default=None, max_length=255)
    permissions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_default: bool = Field(default=False)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
