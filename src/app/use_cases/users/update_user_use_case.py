from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from .dtos import UpdateUserCommand, UserEnvelope
from .get_user_use_case import USER_NOT_FOUND


class UpdateUserUseCase:
    """Changing role_id also refreshes the denormalized role name."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: UpdateUserCommand) -> Result[UserEnvelope]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            if command.role_id is not None:
                role = await self.uow.roles.get_by_id(command.role_id)
                if role is None:
                    return Return.err(Error("INVALID_ROLE", "Role not found"))
                user.role_id = role.id
                user.role = role.name

            if command.name:
                user.name = command.name
            if command.username:
                user.username = command.username
            if command.email:
                user.email = command.email
            if command.is_active is not None:
                user.is_active = command.is_active

            try:
                user = await self.uow.users.update(user)
            except DuplicateKeyError as e:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", f"User with this {e.field} already exists")
                )

            await self.uow.commit()
            return Return.ok(UserEnvelope(user=UserProfile.from_entity(user)))
