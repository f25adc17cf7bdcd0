from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import ValidationFailedError
from src.app.services.unit_of_work import UnitOfWork
from .get_user_use_case import USER_NOT_FOUND


class DeleteUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[str]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)

            try:
                await self.uow.users.delete(user)
            except ValidationFailedError:
                return Return.err(
                    Error("USER_IN_USE", "User is still referenced by other records")
                )

            await self.uow.commit()
            return Return.ok(f"User with ID {user_id} deleted successfully")
