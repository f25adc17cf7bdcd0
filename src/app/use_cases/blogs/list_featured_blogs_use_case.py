from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import BlogListResponse, BlogSummary

FEATURED_LIMIT = 5


class ListFeaturedBlogsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[BlogListResponse]:
        async with self.uow:
            blogs = await self.uow.blogs.list_featured(FEATURED_LIMIT)
            return Return.ok(BlogListResponse(blogs=[BlogSummary.from_entity(b) for b in blogs]))
