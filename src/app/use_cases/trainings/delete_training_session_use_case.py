from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import DeletedSessionInfo, SessionDeletedResponse
from .errors import SESSION_NOT_FOUND, TRAINING_NOT_FOUND
from .scheduling import load_detail


class DeleteTrainingSessionUseCase:
    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, training_id: UUID, session_id: UUID, deleted_by: Optional[UUID] = None
    ) -> Result[SessionDeletedResponse]:
        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)

            session = await self.uow.training_sessions.get(training.id, session_id)
            if session is None:
                return Return.err(SESSION_NOT_FOUND)

            deleted = DeletedSessionInfo(
                start_date=session.start_date, end_date=session.end_date, venue=session.venue
            )
            await self.uow.training_sessions.delete(session)
            training.updated_by = deleted_by
            training = await self.uow.trainings.update(training)
            await self.uow.commit()

            detail = await load_detail(self.uow, training, self.clock().date())
            return Return.ok(
                SessionDeletedResponse(
                    message="Session deleted successfully",
                    deleted_session=deleted,
                    training=detail,
                )
            )
