from config import Settings
from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.passwords import hash_password, validate_password_strength
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from src.domain.entities import User
from .dtos import CreateUserCommand, UserEnvelope


class CreateUserUseCase:
    """
    Admin account creation.

    Business Rules:
    - Password must pass the strength policy
    - role_id must reference an existing role
    - Email must not already be registered
    """

    def __init__(self, uow: UnitOfWork, settings: Settings):
        self.uow = uow
        self.settings = settings

    async def execute(self, command: CreateUserCommand) -> Result[UserEnvelope]:
        strength = validate_password_strength(command.password)
        if strength.is_err():
            return Return.err(strength.error)

        async with self.uow:
            role = await self.uow.roles.get_by_id(command.role_id)
            if role is None:
                return Return.err(Error("INVALID_ROLE", "Role not found"))

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
            return Return.ok(UserEnvelope(user=UserProfile.from_entity(user)))
