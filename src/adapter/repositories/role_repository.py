from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_raise
from src.app.repositories.role_repository import IRoleRepository
from src.domain.base import utcnow
from src.domain.entities import Role


class RoleRepository(IRoleRepository):
    """Role repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        stmt = select(Role).where(Role.id == role_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Role]:
        stmt = select(Role).where(Role.name == name.lower())
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_default_by_name(self, name: str) -> Optional[Role]:
        stmt = select(Role).where(Role.name == name.lower(), Role.is_default == True)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Role]:
        stmt = select(Role).order_by(Role.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_active_names(self) -> List[str]:
        stmt = select(Role.name).where(Role.is_active == True).order_by(Role.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, role: Role) -> Role:
        role.name = role.name.lower()
        self.session.add(role)
        await flush_or_raise(self.session)
        await self.session.refresh(role)
        return role

    async def update(self, role: Role) -> Role:
        role.name = role.name.lower()
        role.updated_at = utcnow()
        self.session.add(role)
        await flush_or_raise(self.session)
        await self.session.refresh(role)
        return role

    async def delete(self, role: Role) -> None:
        await self.session.delete(role)
        await flush_or_raise(self.session)
