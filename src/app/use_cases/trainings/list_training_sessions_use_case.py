from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import SessionInfo, TrainingSessionsResponse
from .errors import TRAINING_NOT_FOUND


class ListTrainingSessionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, training_id: UUID) -> Result[TrainingSessionsResponse]:
        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)

            sessions = await self.uow.training_sessions.list_for_training(training.id)
            return Return.ok(
                TrainingSessionsResponse(
                    training_id=str(training.id),
                    title=training.title,
                    code=training.code,
                    sessions_count=len(sessions),
                    sessions=[SessionInfo.from_entity(s) for s in sessions],
                )
            )
