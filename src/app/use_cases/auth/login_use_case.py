"""
Login Use Case

Handles user authentication and returns a session token.
"""

import logging

from config import Settings
from libs.result import Error, Result, Return
from src.app.services.passwords import burn_password_check, verify_password
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import AuthResponse, UserProfile

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password fail identically
    - A bcrypt check runs even when the email is unknown (uniform timing)
    - Deactivated accounts are refused after the password check
    - last_login_at is updated in its own commit; failure there is logged
      and does not fail the login
    """

    def __init__(self, uow: UnitOfWork, token_service: TokenService, settings: Settings):
        self.uow = uow
        self.token_service = token_service
        self.settings = settings

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Errors:
            - INVALID_CREDENTIALS: unknown email or wrong password
            - ACCOUNT_DEACTIVATED: user.is_active is False
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                burn_password_check(password, self.settings.BCRYPT_ROUNDS)
                return Return.err(INVALID_CREDENTIALS)

            if not verify_password(password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            if not user.is_active:
                return Return.err(Error("ACCOUNT_DEACTIVATED", "Account is deactivated"))

            profile = UserProfile.from_entity(user)
            token = self.token_service.issue(user)

            now = utcnow()
            try:
                await self.uow.users.set_last_login(user.id, now)
                await self.uow.commit()
                profile.last_login_at = now
            except Exception:
                logger.warning("Could not record last login for user %s", user.id, exc_info=True)
                await self.uow.rollback()

        return Return.ok(AuthResponse(message="Login successful", user=profile, token=token))
