"""
Change Password Use Case

Authenticated password change with current-password reverification.
"""

import logging
from uuid import UUID

from config import Settings
from libs.result import Error, Result, Return
from src.app.services import email_templates
from src.app.services.email_sender import EmailSender
from src.app.services.passwords import (
    hash_password,
    validate_password_strength,
    verify_password,
)
from src.app.services.unit_of_work import UnitOfWork
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Business Rules:
    - new_password must equal confirm_password
    - current_password must verify against the stored hash
    - new_password must differ from the current password
    - new_password must pass the strength policy
    - A password-changed notification is emailed
    """

    def __init__(self, uow: UnitOfWork, email_sender: EmailSender, settings: Settings):
        self.uow = uow
        self.email_sender = email_sender
        self.settings = settings

    async def execute(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> Result[MessageResponse]:
        """
        Errors:
            - PASSWORD_MISMATCH
            - USER_NOT_FOUND
            - INVALID_CURRENT_PASSWORD
            - SAME_PASSWORD
            - WEAK_PASSWORD
        """
        if new_password != confirm_password:
            return Return.err(Error("PASSWORD_MISMATCH", "New passwords do not match"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not verify_password(current_password, user.password_hash):
                return Return.err(
                    Error("INVALID_CURRENT_PASSWORD", "Current password is incorrect")
                )

            if verify_password(new_password, user.password_hash):
                return Return.err(
                    Error(
                        "SAME_PASSWORD",
                        "New password cannot be the same as current password",
                    )
                )

            strength = validate_password_strength(new_password)
            if strength.is_err():
                return Return.err(strength.error)

            user.password_hash = hash_password(new_password, self.settings.BCRYPT_ROUNDS)
            await self.uow.users.update(user)
            await self.uow.commit()

        logger.info("Password changed for user %s", user.id)

        subject, html = email_templates.password_changed(self.settings.APP_NAME, user.name)
        await self.email_sender.send(user.email, subject, html)

        return Return.ok(MessageResponse(message="Password changed successfully"))
