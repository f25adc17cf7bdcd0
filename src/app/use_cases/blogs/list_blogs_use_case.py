import math

from libs.result import Result, Return
from src.app.repositories.blog_repository import BlogFilter
from src.app.services.unit_of_work import UnitOfWork
from .dtos import BlogListResponse, BlogSummary, Pagination


class ListBlogsUseCase:
    """Paginated listing of published blogs."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, blog_filter: BlogFilter, page: int = 1, limit: int = 10, sort: str = "-created_at"
    ) -> Result[BlogListResponse]:
        offset = (page - 1) * limit

        async with self.uow:
            blogs, total = await self.uow.blogs.list_published(blog_filter, offset, limit, sort)

            # Rows expire when the unit of work rolls back on exit
            summaries = [BlogSummary.from_entity(b) for b in blogs]

        return Return.ok(
            BlogListResponse(
                blogs=summaries,
                pagination=Pagination(
                    current_page=page,
                    total_pages=math.ceil(total / limit),
                    total_blogs=total,
                    has_next_page=offset + len(summaries) < total,
                    has_prev_page=page > 1,
                ),
            )
        )
