"""
Register Use Case

Creates an account, resolves its role and issues a session token.
"""

import logging

from config import Settings
from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services import email_templates
from src.app.services.email_sender import EmailSender
from src.app.services.passwords import hash_password, validate_password_strength
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import DefaultRole, User
from .dtos import AuthResponse, RegisterCommand, UserProfile

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject weak passwords before touching the store
    2. Reject duplicate email or username (naming the field)
    3. Resolve the requested role, or the default "user" role
    4. Hash password with bcrypt and create the User
    5. Commit, send the welcome email, issue a session token
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: TokenService,
        email_sender: EmailSender,
        settings: Settings,
    ):
        self.uow = uow
        self.token_service = token_service
        self.email_sender = email_sender
        self.settings = settings

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Returns:
            Result[AuthResponse], or Error:
            - WEAK_PASSWORD: password fails the strength policy
            - USER_ALREADY_EXISTS: email or username taken
            - INVALID_ROLE: unknown role name
            - ROLE_NOT_CONFIGURED: default role missing (roles not seeded)
        """
        strength = validate_password_strength(command.password)
        if strength.is_err():
            return Return.err(strength.error)

        async with self.uow:
            existing = await self.uow.users.find_by_email_or_username(
                command.email, command.username
            )
            if existing:
                field = "email" if existing.email == command.email.lower() else "username"
                return Return.err(
                    Error("USER_ALREADY_EXISTS", f"User with this {field} already exists")
                )

            if command.role_name:
                role = await self.uow.roles.get_by_name(command.role_name)
                if role is None:
                    available = await self.uow.roles.list_active_names()
                    return Return.err(
                        Error(
                            "INVALID_ROLE",
                            f"Invalid role. Available roles: {', '.join(available)}",
                        )
                    )
            else:
                role = await self.uow.roles.get_default_by_name(DefaultRole.user.value)
                if role is None:
                    role = await self.uow.roles.get_by_name(DefaultRole.user.value)
                if role is None:
                    return Return.err(
                        Error("ROLE_NOT_CONFIGURED", "Default user role is not configured")
                    )

            user = User(
                name=command.name,
                username=command.username,
                email=command.email,
                password_hash=hash_password(command.password, self.settings.BCRYPT_ROUNDS),
                role_id=role.id,
                role=role.name,
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateKeyError as e:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", f"User with this {e.field} already exists")
                )

            await self.uow.commit()

        logger.info("Registered user %s with role %s", user.id, user.role)

        subject, html = email_templates.welcome(
            self.settings.APP_NAME, self.settings.FRONTEND_URL, user.name
        )
        await self.email_sender.send(user.email, subject, html)

        return Return.ok(
            AuthResponse(
                message="Registration successful",
                user=UserProfile.from_entity(user),
                token=self.token_service.issue(user),
            )
        )
