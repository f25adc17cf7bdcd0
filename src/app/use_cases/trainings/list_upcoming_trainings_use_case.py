from datetime import datetime
from typing import Callable

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import TrainingListResponse
from .scheduling import load_summaries


class ListUpcomingTrainingsUseCase:
    """Active courses with a session starting today or later, soonest first."""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, limit: int = 10) -> Result[TrainingListResponse]:
        today = self.clock().date()
        async with self.uow:
            trainings = await self.uow.trainings.list_upcoming(today, limit)
            summaries = await load_summaries(self.uow, trainings, today)
        return Return.ok(TrainingListResponse(trainings=summaries))
