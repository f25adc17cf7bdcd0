from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TestimonialEnvelope, TestimonialInfo
from .errors import TESTIMONIAL_NOT_FOUND


class GetTestimonialUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, testimonial_id: UUID) -> Result[TestimonialEnvelope]:
        async with self.uow:
            testimonial = await self.uow.testimonials.get_by_id(testimonial_id)
            if testimonial is None or not testimonial.is_active:
                return Return.err(TESTIMONIAL_NOT_FOUND)
            return Return.ok(
                TestimonialEnvelope(testimonial=TestimonialInfo.from_entity(testimonial))
            )
