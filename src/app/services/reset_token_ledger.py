"""
Password reset token ledger.

Issues opaque single-use reset tokens, checks them, and consumes them.
Only the SHA-256 hash of a token is persisted; the plain token goes out
in the reset email and nowhere else.
"""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken

logger = logging.getLogger(__name__)

INVALID_OR_EXPIRED = Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired reset token")


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class ResetTokenLedger:
    """
    Ledger of password reset tokens.

    Business Rules:
    - Token is 32 random bytes, hex encoded
    - Expires `expiration` after issuance (15 minutes by default)
    - A new token is refused while one issued within `rate_limit_window`
      is still unused and unexpired
    - Consumption is a conditional update, so a token authorizes at most
      one password change even under concurrent requests

    The ledger never commits; callers own the transaction.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        expiration: timedelta = timedelta(minutes=15),
        rate_limit_window: timedelta = timedelta(minutes=5),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.expiration = expiration
        self.rate_limit_window = rate_limit_window
        self.clock = clock

    async def issue(
        self,
        user_id: UUID,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[str]:
        """
        Persist a new reset token for the user.

        Returns:
            Result with the plain token, or Error(RATE_LIMITED)
        """
        now = self.clock()

        outstanding = await self.uow.password_reset_tokens.get_outstanding_since(
            user_id, since=now - self.rate_limit_window, now=now
        )
        if outstanding is not None:
            logger.info("Reset token refused for user %s: request already outstanding", user_id)
            return Return.err(
                Error(
                    "RATE_LIMITED",
                    "Please check your email or wait before requesting another reset",
                )
            )

        token = secrets.token_hex(32)
        await self.uow.password_reset_tokens.create(
            PasswordResetToken(
                user_id=user_id,
                token_hash=hash_reset_token(token),
                used=False,
                ip_address=ip_address,
                user_agent=user_agent,
                expires_at=now + self.expiration,
                created_at=now,
            )
        )
        return Return.ok(token)

    async def verify(self, token: str) -> Result[PasswordResetToken]:
        """The token must exist, be unexpired and unused."""
        if not token:
            return Return.err(INVALID_OR_EXPIRED)

        record = await self.uow.password_reset_tokens.get_by_token_hash(hash_reset_token(token))
        if record is None or record.used or record.expires_at <= self.clock():
            return Return.err(INVALID_OR_EXPIRED)

        return Return.ok(record)

    async def consume(self, record: PasswordResetToken) -> Result[None]:
        """Mark the token used; fails if another request consumed it first."""
        changed = await self.uow.password_reset_tokens.mark_used(record.id)
        if not changed:
            return Return.err(INVALID_OR_EXPIRED)
        record.used = True
        return Return.ok(None)
