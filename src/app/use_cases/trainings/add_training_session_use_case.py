import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import TrainingSession
from src.domain.entities.training import DEFAULT_VENUE
from .dtos import CreateSessionCommand, SessionCreatedResponse
from .errors import SESSION_OVERLAP, TRAINING_NOT_FOUND
from .scheduling import check_session, find_overlap, load_detail

logger = logging.getLogger(__name__)


class AddTrainingSessionUseCase:
    """
    Business Rules:
    - end_date on or after start_date (INVALID_SESSION_DATES)
    - booked seats never exceed total seats (INVALID_SEATS)
    - Dates must not overlap another non-cancelled session (SESSION_OVERLAP)
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        training_id: UUID,
        command: CreateSessionCommand,
        updated_by: Optional[UUID] = None,
    ) -> Result[SessionCreatedResponse]:
        checked = check_session(
            command.start_date, command.end_date, command.seats.total, command.seats.booked
        )
        if checked.is_err():
            return Return.err(checked.error)

        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)

            existing = await self.uow.training_sessions.list_for_training(training.id)
            if find_overlap(existing, command.start_date, command.end_date) is not None:
                return Return.err(SESSION_OVERLAP)

            session = await self.uow.training_sessions.create(
                TrainingSession(
                    training_id=training.id,
                    start_date=command.start_date,
                    end_date=command.end_date,
                    status=command.status,
                    seats_total=command.seats.total,
                    seats_booked=command.seats.booked,
                    venue=command.venue or DEFAULT_VENUE,
                    instructor=command.instructor,
                )
            )
            training.updated_by = updated_by
            training = await self.uow.trainings.update(training)
            await self.uow.commit()
            logger.info("Added session %s to training %s", session.id, training.code)

            detail = await load_detail(self.uow, training, self.clock().date())
            return Return.ok(
                SessionCreatedResponse(
                    message="Session added successfully",
                    session_id=str(session.id),
                    sessions_count=len(detail.sessions),
                    training=detail,
                )
            )
