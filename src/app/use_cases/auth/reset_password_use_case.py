"""
Reset Password Use Case

Sets a new password using a ledger-issued reset token.
"""

import logging
from datetime import datetime
from typing import Callable

from config import Settings
from libs.result import Error, Result, Return
from src.app.services import email_templates
from src.app.services.email_sender import EmailSender
from src.app.services.passwords import (
    hash_password,
    validate_password_strength,
    verify_password,
)
from src.app.services.reset_token_ledger import INVALID_OR_EXPIRED, ResetTokenLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - new_password must equal confirm_password and pass the strength policy
    - Token must exist, be unexpired and unused
    - New password must differ from the current one
    - Password update and token consumption commit in one transaction;
      if the token was consumed concurrently nothing is committed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: EmailSender,
        settings: Settings,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.settings = settings
        self.clock = clock

    async def execute(
        self, token: str, new_password: str, confirm_password: str
    ) -> Result[MessageResponse]:
        """
        Execute reset password use case.

        Errors:
            - PASSWORD_MISMATCH
            - WEAK_PASSWORD
            - INVALID_OR_EXPIRED_TOKEN: unknown, expired or already used
            - SAME_PASSWORD
        """
        if new_password != confirm_password:
            return Return.err(Error("PASSWORD_MISMATCH", "Passwords do not match"))

        strength = validate_password_strength(new_password)
        if strength.is_err():
            return Return.err(strength.error)

        async with self.uow:
            ledger = ResetTokenLedger(self.uow, clock=self.clock)

            verified = await ledger.verify(token)
            if verified.is_err():
                return Return.err(verified.error)
            record = verified.value

            user = await self.uow.users.get_by_id(record.user_id)
            if user is None:
                return Return.err(INVALID_OR_EXPIRED)

            if verify_password(new_password, user.password_hash):
                return Return.err(
                    Error("SAME_PASSWORD", "New password cannot be the same as old password")
                )

            user.password_hash = hash_password(new_password, self.settings.BCRYPT_ROUNDS)
            await self.uow.users.update(user)

            consumed = await ledger.consume(record)
            if consumed.is_err():
                await self.uow.rollback()
                return Return.err(consumed.error)

            await self.uow.commit()

        logger.info("Password reset completed for user %s", user.id)

        subject, html = email_templates.password_changed(self.settings.APP_NAME, user.name)
        await self.email_sender.send(user.email, subject, html)

        return Return.ok(
            MessageResponse(
                message="Password reset successful. You can now login with your new password."
            )
        )
