from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import Contact


class IContactRepository(ABC):
    """Contact repository interface - application layer"""

    @abstractmethod
    async def create(self, contact: Contact) -> Contact:
        pass

    @abstractmethod
    async def get_recent_by_email(self, email: str, since: datetime) -> Optional[Contact]:
        """Get a submission from this email created at or after `since`"""
        pass
