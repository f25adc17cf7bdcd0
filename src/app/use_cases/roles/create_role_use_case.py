from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role
from .dtos import CreateRoleCommand, RoleInfo


class CreateRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateRoleCommand) -> Result[RoleInfo]:
        async with self.uow:
            role = Role(
                name=command.name,
                description=command.description,
                permissions=list(command.permissions),
            )
            try:
                role = await self.uow.roles.create(role)
            except DuplicateKeyError:
                return Return.err(
                    Error("ROLE_ALREADY_EXISTS", f"Role '{command.name.lower()}' already exists")
                )

            await self.uow.commit()
            return Return.ok(RoleInfo.from_entity(role))
