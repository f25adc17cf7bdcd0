from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Testimonial
from src.domain.entities.testimonial import DEFAULT_AVATAR_COLOR, company_from_role, initials
from .dtos import CreateTestimonialCommand, TestimonialEnvelope, TestimonialInfo
from .errors import INVALID_TRAINING


class CreateTestimonialUseCase:
    """
    Business Rules:
    - A referenced course must exist (INVALID_TRAINING); its title fills
      training_name when none is given
    - image defaults to the author's initials, company to the part of role
      after the first comma
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateTestimonialCommand, created_by: Optional[UUID] = None
    ) -> Result[TestimonialEnvelope]:
        async with self.uow:
            training_name = command.training_name
            if command.training_id is not None:
                training = await self.uow.trainings.get_by_id(command.training_id)
                if training is None:
                    return Return.err(INVALID_TRAINING)
                training_name = training_name or training.title

            testimonial = await self.uow.testimonials.create(
                Testimonial(
                    name=command.name,
                    role=command.role,
                    company=command.company or company_from_role(command.role),
                    content=command.content,
                    rating=command.rating,
                    image=command.image or initials(command.name),
                    avatar_color=command.avatar_color or DEFAULT_AVATAR_COLOR,
                    featured=command.featured,
                    training_id=command.training_id,
                    training_name=training_name,
                    display_order=command.display_order,
                    created_by=created_by,
                )
            )
            await self.uow.commit()
            return Return.ok(
                TestimonialEnvelope(
                    message="Testimonial created successfully",
                    testimonial=TestimonialInfo.from_entity(testimonial),
                )
            )
