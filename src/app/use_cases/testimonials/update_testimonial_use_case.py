from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TestimonialEnvelope, TestimonialInfo, UpdateTestimonialCommand
from .errors import INVALID_TRAINING, TESTIMONIAL_NOT_FOUND


class UpdateTestimonialUseCase:
    """Partial update; a new training_id must reference an existing course."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        testimonial_id: UUID,
        command: UpdateTestimonialCommand,
        updated_by: Optional[UUID] = None,
    ) -> Result[TestimonialEnvelope]:
        changes = command.model_dump(exclude_unset=True, exclude_none=True)

        async with self.uow:
            testimonial = await self.uow.testimonials.get_by_id(testimonial_id)
            if testimonial is None or not testimonial.is_active:
                return Return.err(TESTIMONIAL_NOT_FOUND)

            if "training_id" in changes:
                training = await self.uow.trainings.get_by_id(changes["training_id"])
                if training is None:
                    return Return.err(INVALID_TRAINING)
                changes.setdefault("training_name", training.title)

            for field, value in changes.items():
                setattr(testimonial, field, value)
            testimonial.updated_by = updated_by

            testimonial = await self.uow.testimonials.update(testimonial)
            await self.uow.commit()
            return Return.ok(
                TestimonialEnvelope(
                    message="Testimonial updated successfully",
                    testimonial=TestimonialInfo.from_entity(testimonial),
                )
            )
