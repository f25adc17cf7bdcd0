from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Role


class IRoleRepository(ABC):
    """Role repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Role]:
        pass

    @abstractmethod
    async def get_default_by_name(self, name: str) -> Optional[Role]:
        """Get the role with this name only if it is flagged as default"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Role]:
        """List roles, newest first"""
        pass

    @abstractmethod
    async def list_active_names(self) -> List[str]:
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def update(self, role: Role) -> Role:
        pass

    @abstractmethod
    async def delete(self, role: Role) -> None:
        pass
