import math
from datetime import datetime
from typing import Callable

from libs.result import Result, Return
from src.app.repositories.training_repository import TrainingFilter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import TrainingListResponse, TrainingPagination
from .scheduling import load_summaries


class ListTrainingsUseCase:
    """Paginated listing of active courses."""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        training_filter: TrainingFilter,
        page: int = 1,
        limit: int = 10,
        sort: str = "-created_at",
    ) -> Result[TrainingListResponse]:
        offset = (page - 1) * limit

        async with self.uow:
            trainings, total = await self.uow.trainings.list_active(
                training_filter, offset, limit, sort
            )
            summaries = await load_summaries(self.uow, trainings, self.clock().date())

        return Return.ok(
            TrainingListResponse(
                trainings=summaries,
                pagination=TrainingPagination(
                    current_page=page,
                    total_pages=math.ceil(total / limit),
                    total_trainings=total,
                    has_next_page=offset + len(summaries) < total,
                    has_prev_page=page > 1,
                ),
            )
        )
