"""
Role Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Role


class CreateRoleCommand(BaseModel):
    name: str
    description: Optional[str] = None
    permissions: List[str] = []


class UpdateRoleCommand(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[str]] = None
    is_active: Optional[bool] = None


class RoleInfo(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    permissions: List[str]
    is_default: bool
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, role: Role) -> "RoleInfo":
        return cls(
            id=str(role.id),
            name=role.name,
            description=role.description,
            permissions=list(role.permissions or []),
            is_default=role.is_default,
            is_active=role.is_active,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )
