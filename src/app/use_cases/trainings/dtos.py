"""
Training Use Case DTOs
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import (
    DurationUnit,
    SessionStatus,
    StudyMode,
    Training,
    TrainingCategory,
    TrainingSession,
)
from src.domain.entities.training import DEFAULT_SEATS


def _ordinal(day: int) -> str:
    suffix = "th"
    if not 11 <= day % 100 <= 13:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_session_dates(start_date: date, end_date: date) -> str:
    """'5th March - 9th March'"""
    return (
        f"{_ordinal(start_date.day)} {start_date:%B} - {_ordinal(end_date.day)} {end_date:%B}"
    )


class DurationInfo(BaseModel):
    value: int
    unit: DurationUnit = DurationUnit.days
    display: str


class CostInfo(BaseModel):
    amount: float
    currency: str = "KSH"
    display: str
    tax_inclusive: bool = False


class SeatsCommand(BaseModel):
    total: int = DEFAULT_SEATS
    booked: int = 0


class UpdateSeatsCommand(BaseModel):
    total: Optional[int] = None
    booked: Optional[int] = None


class CreateSessionCommand(BaseModel):
    start_date: date
    end_date: date
    status: SessionStatus = SessionStatus.scheduled
    seats: SeatsCommand = SeatsCommand()
    venue: Optional[str] = None
    instructor: Optional[str] = None


class UpdateSessionCommand(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[SessionStatus] = None
    seats: Optional[UpdateSeatsCommand] = None
    venue: Optional[str] = None
    instructor: Optional[str] = None


class CreateTrainingCommand(BaseModel):
    title: str
    target_group: str
    duration: DurationInfo
    cost: CostInfo
    sessions: List[CreateSessionCommand]
    description: Optional[str] = None
    category: TrainingCategory = TrainingCategory.safety
    mode_of_study: List[StudyMode] = [StudyMode.full_time]
    prerequisites: List[str] = []
    learning_outcomes: List[str] = []
    requirements: List[str] = []
    certification: Optional[str] = None
    is_featured: bool = False
    registration_fee: Optional[float] = None


class UpdateTrainingCommand(BaseModel):
    """Sessions, code and slug are not changed through a course update."""

    title: Optional[str] = None
    target_group: Optional[str] = None
    duration: Optional[DurationInfo] = None
    cost: Optional[CostInfo] = None
    description: Optional[str] = None
    category: Optional[TrainingCategory] = None
    mode_of_study: Optional[List[StudyMode]] = None
    prerequisites: Optional[List[str]] = None
    learning_outcomes: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    certification: Optional[str] = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None
    registration_fee: Optional[float] = None


class SeatsInfo(BaseModel):
    total: int
    booked: int
    available: int


class SessionInfo(BaseModel):
    id: str
    start_date: date
    end_date: date
    status: SessionStatus
    seats: SeatsInfo
    venue: str
    instructor: Optional[str] = None
    formatted_dates: str
    duration_in_days: int

    @classmethod
    def from_entity(cls, session: TrainingSession) -> "SessionInfo":
        return cls(
            id=str(session.id),
            start_date=session.start_date,
            end_date=session.end_date,
            status=session.status,
            seats=SeatsInfo(
                total=session.seats_total,
                booked=session.seats_booked,
                available=session.seats_available,
            ),
            venue=session.venue,
            instructor=session.instructor,
            formatted_dates=format_session_dates(session.start_date, session.end_date),
            duration_in_days=(session.end_date - session.start_date).days + 1,
        )


class TrainingSummary(BaseModel):
    id: str
    code: str
    title: str
    slug: str
    description: Optional[str] = None
    target_group: str
    duration: DurationInfo
    cost: CostInfo
    category: TrainingCategory
    mode_of_study: List[str]
    is_featured: bool
    registration_fee: float
    certification: str
    sessions: List[SessionInfo]
    upcoming_sessions: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(
        cls, training: Training, sessions: List[TrainingSession], today: date
    ) -> "TrainingSummary":
        return cls(**_summary_fields(training, sessions, today))


class TrainingDetail(TrainingSummary):
    prerequisites: List[str]
    learning_outcomes: List[str]
    requirements: List[str]
    is_active: bool
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(
        cls, training: Training, sessions: List[TrainingSession], today: date
    ) -> "TrainingDetail":
        return cls(
            **_summary_fields(training, sessions, today),
            prerequisites=list(training.prerequisites or []),
            learning_outcomes=list(training.learning_outcomes or []),
            requirements=list(training.requirements or []),
            is_active=training.is_active,
            created_by=str(training.created_by) if training.created_by else None,
            updated_by=str(training.updated_by) if training.updated_by else None,
            updated_at=training.updated_at,
        )


def _summary_fields(training: Training, sessions: List[TrainingSession], today: date) -> dict:
    upcoming = [
        s for s in sessions if s.status == SessionStatus.scheduled and s.start_date > today
    ]
    return dict(
        id=str(training.id),
        code=training.code,
        title=training.title,
        slug=training.slug,
        description=training.description,
        target_group=training.target_group,
        duration=DurationInfo(
            value=training.duration_value,
            unit=training.duration_unit,
            display=training.duration_display,
        ),
        cost=CostInfo(
            amount=training.cost_amount,
            currency=training.cost_currency,
            display=training.cost_display,
            tax_inclusive=training.cost_tax_inclusive,
        ),
        category=training.category,
        mode_of_study=list(training.mode_of_study or []),
        is_featured=training.is_featured,
        registration_fee=training.registration_fee,
        certification=training.certification,
        sessions=[SessionInfo.from_entity(s) for s in sessions],
        upcoming_sessions=len(upcoming),
        created_at=training.created_at,
    )


class TrainingEnvelope(BaseModel):
    message: Optional[str] = None
    training: TrainingDetail


class TrainingPagination(BaseModel):
    current_page: int
    total_pages: int
    total_trainings: int
    has_next_page: bool
    has_prev_page: bool


class TrainingListResponse(BaseModel):
    trainings: List[TrainingSummary]
    pagination: Optional[TrainingPagination] = None


class TrainingCategoryCount(BaseModel):
    name: str
    count: int
    slug: str


class TrainingCategoriesResponse(BaseModel):
    categories: List[TrainingCategoryCount]


class TrainingSessionsResponse(BaseModel):
    training_id: str
    title: str
    code: str
    sessions_count: int
    sessions: List[SessionInfo]


class SessionCreatedResponse(BaseModel):
    message: str
    session_id: str
    sessions_count: int
    training: TrainingDetail


class DeletedSessionInfo(BaseModel):
    start_date: date
    end_date: date
    venue: str


class SessionDeletedResponse(BaseModel):
    message: str
    deleted_session: DeletedSessionInfo
    training: TrainingDetail
