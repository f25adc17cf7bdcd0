from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """Get the first user whose email or username matches"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List users, newest first"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user; raises DuplicateKeyError on email/username clash"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user; raises DuplicateKeyError on email/username clash"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user"""
        pass

    @abstractmethod
    async def set_last_login(self, user_id: UUID, at: datetime) -> None:
        """Record a successful login time"""
        pass
