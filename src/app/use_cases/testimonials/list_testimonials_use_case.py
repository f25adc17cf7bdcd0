import math

from libs.result import Result, Return
from src.app.repositories.testimonial_repository import TestimonialFilter
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TestimonialInfo, TestimonialListResponse, TestimonialPagination

FEATURED_LIMIT = 6


class ListTestimonialsUseCase:
    """Paginated listing of active, approved testimonials."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        testimonial_filter: TestimonialFilter,
        page: int = 1,
        limit: int = 10,
        sort: str = "-created_at",
    ) -> Result[TestimonialListResponse]:
        offset = (page - 1) * limit

        async with self.uow:
            testimonials, total = await self.uow.testimonials.list_visible(
                testimonial_filter, offset, limit, sort
            )
            items = [TestimonialInfo.from_entity(t) for t in testimonials]

        return Return.ok(
            TestimonialListResponse(
                testimonials=items,
                pagination=TestimonialPagination(
                    current_page=page,
                    total_pages=math.ceil(total / limit),
                    total_testimonials=total,
                    has_next_page=offset + len(items) < total,
                    has_prev_page=page > 1,
                ),
            )
        )


class ListFeaturedTestimonialsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = FEATURED_LIMIT) -> Result[TestimonialListResponse]:
        async with self.uow:
            testimonials = await self.uow.testimonials.list_featured(limit)
            return Return.ok(
                TestimonialListResponse(
                    testimonials=[TestimonialInfo.from_entity(t) for t in testimonials]
                )
            )
