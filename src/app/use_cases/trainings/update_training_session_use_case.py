from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import TrainingEnvelope, UpdateSessionCommand
from .errors import SESSION_NOT_FOUND, SESSION_OVERLAP, TRAINING_NOT_FOUND
from .scheduling import check_session, find_overlap, load_detail


class UpdateTrainingSessionUseCase:
    """Partial session update; the resulting session must still pass the scheduling rules."""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        training_id: UUID,
        session_id: UUID,
        command: UpdateSessionCommand,
        updated_by: Optional[UUID] = None,
    ) -> Result[TrainingEnvelope]:
        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)

            session = await self.uow.training_sessions.get(training.id, session_id)
            if session is None:
                return Return.err(SESSION_NOT_FOUND)

            start_date = command.start_date or session.start_date
            end_date = command.end_date or session.end_date
            seats_total = session.seats_total
            seats_booked = session.seats_booked
            if command.seats is not None:
                if command.seats.total is not None:
                    seats_total = command.seats.total
                if command.seats.booked is not None:
                    seats_booked = command.seats.booked

            checked = check_session(start_date, end_date, seats_total, seats_booked)
            if checked.is_err():
                return Return.err(checked.error)

            if command.start_date or command.end_date:
                others = await self.uow.training_sessions.list_for_training(training.id)
                if find_overlap(others, start_date, end_date, exclude_id=session.id):
                    return Return.err(SESSION_OVERLAP)

            session.start_date = start_date
            session.end_date = end_date
            session.seats_total = seats_total
            session.seats_booked = seats_booked
            if command.status is not None:
                session.status = command.status
            if command.venue is not None:
                session.venue = command.venue
            if command.instructor is not None:
                session.instructor = command.instructor

            await self.uow.training_sessions.update(session)
            training.updated_by = updated_by
            training = await self.uow.trainings.update(training)
            await self.uow.commit()

            detail = await load_detail(self.uow, training, self.clock().date())
            return Return.ok(
                TrainingEnvelope(message="Session updated successfully", training=detail)
            )
