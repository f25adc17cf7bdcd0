from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.trainings.errors import TRAINING_NOT_FOUND
from .dtos import TestimonialInfo, TrainingReference, TrainingTestimonialsResponse


class ListTrainingTestimonialsUseCase:
    """Best rated testimonials for one course."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, training_id: UUID, limit: int = 5
    ) -> Result[TrainingTestimonialsResponse]:
        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)

            testimonials = await self.uow.testimonials.list_for_training(training.id, limit)
            return Return.ok(
                TrainingTestimonialsResponse(
                    training=TrainingReference(
                        id=str(training.id), title=training.title, code=training.code
                    ),
                    testimonials=[TestimonialInfo.from_entity(t) for t in testimonials],
                    count=len(testimonials),
                )
            )
