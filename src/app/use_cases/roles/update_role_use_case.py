from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RoleInfo, UpdateRoleCommand
from .get_role_use_case import ROLE_NOT_FOUND


class UpdateRoleUseCase:
    """Partial update; renaming a role leaves users' denormalized role names as they were."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, role_id: UUID, command: UpdateRoleCommand) -> Result[RoleInfo]:
        async with self.uow:
            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(ROLE_NOT_FOUND)

            if command.name:
                role.name = command.name
            if command.description is not None:
                role.description = command.description
            if command.permissions is not None:
                role.permissions = list(command.permissions)
            if command.is_active is not None:
                role.is_active = command.is_active

            try:
                role = await self.uow.roles.update(role)
            except DuplicateKeyError:
                return Return.err(
                    Error("ROLE_ALREADY_EXISTS", f"Role '{command.name.lower()}' already exists")
                )

            await self.uow.commit()
            return Return.ok(RoleInfo.from_entity(role))
