from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Blog, slugify
from src.domain.entities.blog import DEFAULT_BLOG_IMAGE_URL
from .dtos import BlogDetail, BlogEnvelope, CreateBlogCommand

DUPLICATE_BLOG = Error("BLOG_ALREADY_EXISTS", "A blog with similar title already exists")


class CreateBlogUseCase:
    """
    Business Rules:
    - slug is derived from the title; a clash is BLOG_ALREADY_EXISTS
    - meta_title / meta_description default to title / excerpt
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateBlogCommand, author_id: Optional[UUID] = None
    ) -> Result[BlogEnvelope]:
        slug = slugify(command.title)
        if not slug:
            return Return.err(Error("INVALID_TITLE", "Title must contain letters or digits"))

        async with self.uow:
            blog = Blog(
                title=command.title,
                slug=slug,
                excerpt=command.excerpt,
                content=command.content,
                category=command.category,
                author=command.author,
                author_id=author_id,
                image_url=command.image_url or DEFAULT_BLOG_IMAGE_URL,
                read_time=command.read_time or "5 min read",
                featured=command.featured,
                published=command.published,
                tags=list(command.tags),
                meta_title=command.meta_title or command.title,
                meta_description=command.meta_description or command.excerpt[:160],
            )
            try:
                blog = await self.uow.blogs.create(blog)
            except DuplicateKeyError:
                return Return.err(DUPLICATE_BLOG)

            await self.uow.commit()
            return Return.ok(
                BlogEnvelope(message="Blog created successfully", blog=BlogDetail.from_entity(blog))
            )
