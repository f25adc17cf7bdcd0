from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import slugify
from .create_blog_use_case import DUPLICATE_BLOG
from .dtos import BlogDetail, BlogEnvelope, UpdateBlogCommand
from .get_blog_use_case import BLOG_NOT_FOUND


class UpdateBlogUseCase:
    """Partial update; a new title also regenerates the slug."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, blog_id: UUID, command: UpdateBlogCommand) -> Result[BlogEnvelope]:
        changes = command.model_dump(exclude_unset=True, exclude_none=True)

        async with self.uow:
            blog = await self.uow.blogs.get_by_id(blog_id)
            if blog is None:
                return Return.err(BLOG_NOT_FOUND)

            if "title" in changes:
                slug = slugify(changes["title"])
                if not slug:
                    return Return.err(
                        Error("INVALID_TITLE", "Title must contain letters or digits")
                    )
                blog.slug = slug

            for field, value in changes.items():
                setattr(blog, field, value)

            try:
                blog = await self.uow.blogs.update(blog)
            except DuplicateKeyError:
                return Return.err(DUPLICATE_BLOG)

            await self.uow.commit()
            return Return.ok(
                BlogEnvelope(message="Blog updated successfully", blog=BlogDetail.from_entity(blog))
            )
