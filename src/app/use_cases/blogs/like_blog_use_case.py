from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LikeResponse
from .get_blog_use_case import BLOG_NOT_FOUND


class LikeBlogUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, blog_id: UUID) -> Result[LikeResponse]:
        async with self.uow:
            likes = await self.uow.blogs.increment_likes(blog_id)
            if likes is None:
                return Return.err(BLOG_NOT_FOUND)

            await self.uow.commit()
            return Return.ok(LikeResponse(message="Blog liked successfully", likes=likes))
