from datetime import datetime
from typing import Callable
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import TrainingEnvelope
from .errors import TRAINING_NOT_FOUND
from .scheduling import load_detail


class GetTrainingUseCase:
    """Lookup by id also returns deactivated courses, flagged by is_active."""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, training_id: UUID) -> Result[TrainingEnvelope]:
        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)
            detail = await load_detail(self.uow, training, self.clock().date())
            return Return.ok(TrainingEnvelope(training=detail))


class GetTrainingByCodeUseCase:
    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, code: str) -> Result[TrainingEnvelope]:
        async with self.uow:
            training = await self.uow.trainings.get_active_by_code(code)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)
            detail = await load_detail(self.uow, training, self.clock().date())
            return Return.ok(TrainingEnvelope(training=detail))
