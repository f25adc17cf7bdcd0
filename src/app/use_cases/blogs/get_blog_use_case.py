from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import BlogDetail, BlogEnvelope

BLOG_NOT_FOUND = Error("BLOG_NOT_FOUND", "Blog not found")


class GetBlogUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, blog_id: UUID) -> Result[BlogEnvelope]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(BLOG_NOT_FOUND)
            return Return.ok(BlogEnvelope(blog=BlogDetail.from_entity(blog)))


class GetBlogBySlugUseCase:
    """Reading a post by slug counts as a view."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, slug: str) -> Result[BlogEnvelope]:
        async with self.uow:
            blog = await self.uow.blogs.get_by_slug(slug)
            if blog is None:
                return Return.err(BLOG_NOT_FOUND)

            await self.uow.blogs.increment_views(blog.id)
            await self.uow.commit()

            blog = await self.uow.blogs.get_by_id(blog.id)
            return Return.ok(BlogEnvelope(blog=BlogDetail.from_entity(blog)))
