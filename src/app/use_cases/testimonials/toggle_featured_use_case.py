from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TestimonialEnvelope, TestimonialInfo
from .errors import TESTIMONIAL_NOT_FOUND


class ToggleTestimonialFeaturedUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, testimonial_id: UUID, updated_by: Optional[UUID] = None
    ) -> Result[TestimonialEnvelope]:
        async with self.uow:
            testimonial = await self.uow.testimonials.get_by_id(testimonial_id)
            if testimonial is None or not testimonial.is_active:
                return Return.err(TESTIMONIAL_NOT_FOUND)

            testimonial.featured = not testimonial.featured
            testimonial.updated_by = updated_by
            testimonial = await self.uow.testimonials.update(testimonial)
            await self.uow.commit()

            state = "featured" if testimonial.featured else "unfeatured"
            return Return.ok(
                TestimonialEnvelope(
                    message=f"Testimonial {state} successfully",
                    testimonial=TestimonialInfo.from_entity(testimonial),
                )
            )
