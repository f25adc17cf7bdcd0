from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RoleInfo

ROLE_NOT_FOUND = Error("ROLE_NOT_FOUND", "Role not found")


class GetRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, role_id: UUID) -> Result[RoleInfo]:
        async with self.uow:
            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(ROLE_NOT_FOUND)
            return Return.ok(RoleInfo.from_entity(role))
