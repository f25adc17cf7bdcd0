from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .errors import TRAINING_NOT_FOUND


class DeleteTrainingUseCase:
    """Deactivates the course; sessions and testimonials keep pointing at it."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, training_id: UUID, deleted_by: Optional[UUID] = None) -> Result[str]:
        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)

            training.is_active = False
            training.updated_by = deleted_by
            await self.uow.trainings.update(training)
            await self.uow.commit()
            return Return.ok("Training course deleted successfully")
