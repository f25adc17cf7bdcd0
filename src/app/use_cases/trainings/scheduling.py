"""
Session scheduling rules shared by the course and session use cases.
"""

from datetime import date
from typing import Iterable, List, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SessionStatus, Training, TrainingSession
from .dtos import TrainingDetail, TrainingSummary
from .errors import INVALID_SEATS, INVALID_SESSION_DATES


def check_session(
    start_date: date, end_date: date, seats_total: int, seats_booked: int
) -> Result[None]:
    if end_date < start_date:
        return Return.err(INVALID_SESSION_DATES)
    if seats_booked > seats_total:
        return Return.err(INVALID_SEATS)
    return Return.ok(None)


def find_overlap(
    sessions: Iterable[TrainingSession],
    start_date: date,
    end_date: date,
    exclude_id: Optional[UUID] = None,
) -> Optional[TrainingSession]:
    """Cancelled sessions no longer hold their dates."""
    for session in sessions:
        if session.id == exclude_id or session.status == SessionStatus.cancelled:
            continue
        if session.overlaps(start_date, end_date):
            return session
    return None


async def load_detail(uow: UnitOfWork, training: Training, today: date) -> TrainingDetail:
    sessions = await uow.training_sessions.list_for_training(training.id)
    return TrainingDetail.from_entity(training, sessions, today)


async def load_summaries(
    uow: UnitOfWork, trainings: List[Training], today: date
) -> List[TrainingSummary]:
    sessions = await uow.training_sessions.list_for_trainings([t.id for t in trainings])
    by_training = {}
    for session in sessions:
        by_training.setdefault(session.training_id, []).append(session)
    return [
        TrainingSummary.from_entity(t, by_training.get(t.id, []), today) for t in trainings
    ]
