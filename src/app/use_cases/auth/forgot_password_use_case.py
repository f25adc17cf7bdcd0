"""
Forgot Password Use Case

Issues a password reset token and emails the reset link.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from config import Settings
from libs.result import Result, Return
from src.app.services import email_templates
from src.app.services.email_sender import EmailSender
from src.app.services.reset_token_ledger import ResetTokenLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

GENERIC_RESPONSE_MESSAGE = (
    "If an account exists with this email, you will receive a reset link shortly."
)


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Same response whether or not the email belongs to an account
    - Token issuance and email only happen for existing accounts
    - Ledger refuses a new token while one from the last 5 minutes is
      still outstanding (RATE_LIMITED)
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
        self,
        email: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> Result[MessageResponse]:
        """
        Execute forgot password use case.

        Errors:
            - RATE_LIMITED: an unused token was issued within the window
        """
        response = MessageResponse(message=GENERIC_RESPONSE_MESSAGE)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.ok(response)

            ledger = ResetTokenLedger(
                self.uow,
                expiration=timedelta(minutes=self.settings.RESET_TOKEN_EXPIRATION_MINUTES),
                rate_limit_window=timedelta(minutes=self.settings.RESET_RATE_LIMIT_MINUTES),
                clock=self.clock,
            )
            issued = await ledger.issue(user.id, ip_address=ip_address, user_agent=user_agent)
            if issued.is_err():
                return Return.err(issued.error)

            await self.uow.commit()

        logger.info("Password reset token issued for user %s", user.id)

        reset_link = f"{self.settings.FRONTEND_URL}/reset-password?token={issued.value}"
        subject, html = email_templates.password_reset(
            reset_link, user.name, self.settings.RESET_TOKEN_EXPIRATION_MINUTES
        )
        await self.email_sender.send(user.email, subject, html)

        return Return.ok(response)
