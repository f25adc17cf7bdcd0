from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ProfileResponse, UpdateProfileCommand, UserProfile


class UpdateProfileUseCase:
    """
    Update name, username and/or email of the authenticated user.

    Only supplied fields change. Uniqueness clashes are reported by the
    repository and returned as USER_ALREADY_EXISTS.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: UpdateProfileCommand) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if command.name:
                user.name = command.name
            if command.username:
                user.username = command.username
            if command.email:
                user.email = command.email

            try:
                user = await self.uow.users.update(user)
            except DuplicateKeyError as e:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", f"User with this {e.field} already exists")
                )

            await self.uow.commit()

            return Return.ok(
                ProfileResponse(
                    message="Profile updated successfully",
                    user=UserProfile.from_entity(user),
                )
            )
