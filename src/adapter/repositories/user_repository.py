from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_raise
from src.app.repositories.user_repository import IUserRepository
from src.domain.base import utcnow
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email.lower())
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        stmt = select(User).where(or_(User.email == email.lower(), User.username == username))
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[User]:
        stmt = select(User).order_by(User.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        user.email = user.email.lower()
        self.session.add(user)
        await flush_or_raise(self.session)
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.email = user.email.lower()
        user.updated_at = utcnow()
        self.session.add(user)
        await flush_or_raise(self.session)
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        await self.session.delete(user)
        await flush_or_raise(self.session)

    async def set_last_login(self, user_id: UUID, at: datetime) -> None:
        stmt = update(User).where(User.id == user_id).values(last_login_at=at)
        await self.session.execute(stmt)
        await self.session.flush()
