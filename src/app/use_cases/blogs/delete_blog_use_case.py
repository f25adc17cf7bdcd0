from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .get_blog_use_case import BLOG_NOT_FOUND


class DeleteBlogUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, blog_id: UUID) -> Result[str]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(BLOG_NOT_FOUND)

            await self.uow.blogs.delete(blog)
            await self.uow.commit()
            return Return.ok("Blog deleted successfully")
