from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .errors import TESTIMONIAL_NOT_FOUND


class DeleteTestimonialUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, testimonial_id: UUID) -> Result[str]:
        async with self.uow:
            testimonial = await self.uow.testimonials.get_by_id(testimonial_id)
            if testimonial is None:
                return Return.err(TESTIMONIAL_NOT_FOUND)

            await self.uow.testimonials.delete(testimonial)
            await self.uow.commit()
            return Return.ok("Testimonial deleted successfully")
