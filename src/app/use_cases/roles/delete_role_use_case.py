from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import ValidationFailedError
from src.app.services.unit_of_work import UnitOfWork
from .get_role_use_case import ROLE_NOT_FOUND


class DeleteRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, role_id: UUID) -> Result[str]:
        async with self.uow:
            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(ROLE_NOT_FOUND)

            try:
                await self.uow.roles.delete(role)
            except ValidationFailedError:
                return Return.err(
                    Error("ROLE_IN_USE", "Role is still assigned to one or more users")
                )

            await self.uow.commit()
            return Return.ok("Role deleted successfully")
