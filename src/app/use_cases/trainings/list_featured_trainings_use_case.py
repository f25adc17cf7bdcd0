from datetime import datetime
from typing import Callable

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import TrainingListResponse
from .scheduling import load_summaries

FEATURED_LIMIT = 8


class ListFeaturedTrainingsUseCase:
    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[TrainingListResponse]:
        async with self.uow:
            trainings = await self.uow.trainings.list_featured(FEATURED_LIMIT)
            summaries = await load_summaries(self.uow, trainings, self.clock().date())
        return Return.ok(TrainingListResponse(trainings=summaries))
