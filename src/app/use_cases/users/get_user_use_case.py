from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from .dtos import UserEnvelope

USER_NOT_FOUND = Error("USER_NOT_FOUND", "User not found")


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserEnvelope]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)
            return Return.ok(UserEnvelope(user=UserProfile.from_entity(user)))
