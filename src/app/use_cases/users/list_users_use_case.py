from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from .dtos import UserListResponse


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UserListResponse]:
        async with self.uow:
            users = await self.uow.users.list_all()
            if not users:
                return Return.err(Error("USER_NOT_FOUND", "No users found"))
            return Return.ok(UserListResponse(users=[UserProfile.from_entity(u) for u in users]))
