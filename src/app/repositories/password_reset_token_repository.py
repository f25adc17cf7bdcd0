from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        pass

    @abstractmethod
    async def get_outstanding_since(
        self, user_id: UUID, since: datetime, now: datetime
    ) -> Optional[PasswordResetToken]:
        """Get an unused, unexpired token for the user created at or after `since`"""
        pass

    @abstractmethod
    async def mark_used(self, token_id: UUID) -> bool:
        """Flip used to True only if it is still False; returns whether a row changed"""
        pass
