from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RoleInfo


class ListRolesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[RoleInfo]]:
        async with self.uow:
            roles = await self.uow.roles.list_all()
            return Return.ok([RoleInfo.from_entity(r) for r in roles])
