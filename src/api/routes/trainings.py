from datetime import date
from typing import List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.repositories.training_repository import TrainingFilter
from src.app.services.token_service import TokenClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.trainings import (
    AddTrainingSessionUseCase,
    CreateSessionCommand,
    CreateTrainingCommand,
    CreateTrainingUseCase,
    DeleteTrainingSessionUseCase,
    DeleteTrainingUseCase,
    GetTrainingByCodeUseCase,
    GetTrainingUseCase,
    ListFeaturedTrainingsUseCase,
    ListTrainingCategoriesUseCase,
    ListTrainingSessionsUseCase,
    ListTrainingsUseCase,
    ListUpcomingTrainingsUseCase,
    SessionCreatedResponse,
    SessionDeletedResponse,
    TrainingCategoriesResponse,
    TrainingEnvelope,
    TrainingListResponse,
    TrainingSessionsResponse,
    UpdateSessionCommand,
    UpdateTrainingCommand,
    UpdateTrainingSessionUseCase,
    UpdateTrainingUseCase,
)
from src.depends import get_unit_of_work, require_roles
from src.domain.entities import DurationUnit, SessionStatus, StudyMode, TrainingCategory

router = APIRouter(prefix="/trainings", tags=["Trainings"])

TrainingSort = Literal[
    "-created_at", "created_at", "title", "-title", "registration_fee", "-registration_fee"
]

BAD_REQUEST_CODES = ("INVALID_TITLE", "INVALID_SESSION_DATES", "SESSION_OVERLAP", "INVALID_SEATS")


class DurationRequest(BaseModel):
    value: int = Field(..., ge=1)
    unit: DurationUnit = DurationUnit.days
    display: str = Field(..., min_length=1, max_length=50)


class CostRequest(BaseModel):
    amount: float = Field(..., ge=0)
    currency: str = Field("KSH", min_length=3, max_length=3)
    display: str = Field(..., min_length=1, max_length=50)
    tax_inclusive: bool = False


class SeatsRequest(BaseModel):
    total: int = Field(20, ge=1)
    booked: int = Field(0, ge=0)


class SeatsUpdateRequest(BaseModel):
    total: Optional[int] = Field(None, ge=1)
    booked: Optional[int] = Field(None, ge=0)


class SessionRequest(BaseModel):
    start_date: date
    end_date: date
    status: SessionStatus = SessionStatus.scheduled
    seats: SeatsRequest = SeatsRequest()
    venue: Optional[str] = Field(None, max_length=200)
    instructor: Optional[str] = Field(None, max_length=100)


class SessionUpdateRequest(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[SessionStatus] = None
    seats: Optional[SeatsUpdateRequest] = None
    venue: Optional[str] = Field(None, max_length=200)
    instructor: Optional[str] = Field(None, max_length=100)


class TrainingRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    target_group: str = Field(..., min_length=1, max_length=500)
    duration: DurationRequest
    cost: CostRequest
    sessions: List[SessionRequest] = Field(..., min_length=1)
    description: Optional[str] = Field(None, max_length=2000)
    category: TrainingCategory = TrainingCategory.safety
    mode_of_study: List[StudyMode] = [StudyMode.full_time]
    prerequisites: List[str] = []
    learning_outcomes: List[str] = []
    requirements: List[str] = []
    certification: Optional[str] = Field(None, max_length=200)
    is_featured: bool = False
    registration_fee: Optional[float] = Field(None, ge=0)


class TrainingUpdateRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    target_group: Optional[str] = Field(None, min_length=1, max_length=500)
    duration: Optional[DurationRequest] = None
    cost: Optional[CostRequest] = None
    description: Optional[str] = Field(None, max_length=2000)
    category: Optional[TrainingCategory] = None
    mode_of_study: Optional[List[StudyMode]] = None
    prerequisites: Optional[List[str]] = None
    learning_outcomes: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    certification: Optional[str] = Field(None, max_length=200)
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None
    registration_fee: Optional[float] = Field(None, ge=0)


class TrainingMessageResponse(BaseModel):
    message: str


def _raise_for_error(error):
    if error.code in ("TRAINING_NOT_FOUND", "SESSION_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "TRAINING_ALREADY_EXISTS":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code in BAD_REQUEST_CODES:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=TrainingListResponse)
async def list_trainings(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: Optional[TrainingCategory] = None,
    mode_of_study: Optional[StudyMode] = None,
    featured: Optional[bool] = None,
    search: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    sort: TrainingSort = "-created_at",
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Active courses only.

    start_date / end_date keep courses with a session starting in that range.
    """
    training_filter = TrainingFilter(
        category=category,
        mode_of_study=mode_of_study.value if mode_of_study else None,
        featured=featured,
        search=search,
        start_date=start_date,
        end_date=end_date,
    )
    result = await ListTrainingsUseCase(uow).execute(
        training_filter, page=page, limit=limit, sort=sort
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


# Static paths are registered before /{training_id} so they are matched first


@router.get("/featured", status_code=status.HTTP_200_OK, response_model=TrainingListResponse)
async def list_featured_trainings(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListFeaturedTrainingsUseCase(uow).execute()
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/upcoming", status_code=status.HTTP_200_OK, response_model=TrainingListResponse)
async def list_upcoming_trainings(
    limit: int = Query(10, ge=1, le=100),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUpcomingTrainingsUseCase(uow).execute(limit=limit)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get(
    "/categories", status_code=status.HTTP_200_OK, response_model=TrainingCategoriesResponse
)
async def list_training_categories(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListTrainingCategoriesUseCase(uow).execute()
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/code/{code}", status_code=status.HTTP_200_OK, response_model=TrainingEnvelope)
async def get_training_by_code(code: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetTrainingByCodeUseCase(uow).execute(code)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/{training_id}", status_code=status.HTTP_200_OK, response_model=TrainingEnvelope)
async def get_training(training_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetTrainingUseCase(uow).execute(training_id)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TrainingEnvelope)
async def create_training(
    request: TrainingRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: A session ends before it starts or is overbooked
        - 403 Forbidden: Caller is neither admin nor editor
        - 409 Conflict: A course with the same title exists
    """
    result = await CreateTrainingUseCase(uow).execute(
        CreateTrainingCommand(**request.model_dump()), created_by=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.put("/{training_id}", status_code=status.HTTP_200_OK, response_model=TrainingEnvelope)
async def update_training(
    training_id: UUID,
    request: TrainingUpdateRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateTrainingCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateTrainingUseCase(uow).execute(
        training_id, command, updated_by=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.delete(
    "/{training_id}", status_code=status.HTTP_200_OK, response_model=TrainingMessageResponse
)
async def delete_training(
    training_id: UUID,
    current_user: TokenClaims = Depends(require_roles("admin")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Deactivates the course; it stays readable by id."""
    result = await DeleteTrainingUseCase(uow).execute(
        training_id, deleted_by=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return TrainingMessageResponse(message=result.value)


@router.get(
    "/{training_id}/sessions",
    status_code=status.HTTP_200_OK,
    response_model=TrainingSessionsResponse,
)
async def list_training_sessions(training_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListTrainingSessionsUseCase(uow).execute(training_id)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.post(
    "/{training_id}/sessions",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionCreatedResponse,
)
async def add_training_session(
    training_id: UUID,
    request: SessionRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AddTrainingSessionUseCase(uow).execute(
        training_id,
        CreateSessionCommand(**request.model_dump()),
        updated_by=UUID(current_user.user_id),
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.put(
    "/{training_id}/sessions/{session_id}",
    status_code=status.HTTP_200_OK,
    response_model=TrainingEnvelope,
)
async def update_training_session(
    training_id: UUID,
    session_id: UUID,
    request: SessionUpdateRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateTrainingSessionUseCase(uow).execute(
        training_id,
        session_id,
        UpdateSessionCommand(**request.model_dump(exclude_unset=True)),
        updated_by=UUID(current_user.user_id),
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.delete(
    "/{training_id}/sessions/{session_id}",
    status_code=status.HTTP_200_OK,
    response_model=SessionDeletedResponse,
)
async def delete_training_session(
    training_id: UUID,
    session_id: UUID,
    current_user: TokenClaims = Depends(require_roles("admin")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTrainingSessionUseCase(uow).execute(
        training_id, session_id, deleted_by=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value
