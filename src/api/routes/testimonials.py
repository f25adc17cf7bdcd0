from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.repositories.testimonial_repository import TestimonialFilter
from src.app.services.token_service import TokenClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.testimonials import (
    CreateTestimonialCommand,
    CreateTestimonialUseCase,
    DeleteTestimonialUseCase,
    GetTestimonialUseCase,
    ListFeaturedTestimonialsUseCase,
    ListTestimonialsUseCase,
    ListTrainingTestimonialsUseCase,
    StatisticsResponse,
    TestimonialEnvelope,
    TestimonialListResponse,
    TestimonialStatisticsUseCase,
    ToggleTestimonialFeaturedUseCase,
    TrainingTestimonialsResponse,
    UpdateTestimonialCommand,
    UpdateTestimonialUseCase,
)
from src.depends import get_unit_of_work, require_roles

router = APIRouter(prefix="/testimonials", tags=["Testimonials"])

TestimonialSort = Literal["-created_at", "created_at", "-rating", "rating", "display_order"]

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class TestimonialRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    role: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=1000)
    rating: int = Field(5, ge=1, le=5)
    company: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = None
    avatar_color: Optional[str] = Field(None, pattern=HEX_COLOR)
    featured: bool = False
    training_id: Optional[UUID] = None
    training_name: Optional[str] = Field(None, max_length=200)
    display_order: int = 0


class TestimonialUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1, max_length=1000)
    rating: Optional[int] = Field(None, ge=1, le=5)
    company: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = None
    avatar_color: Optional[str] = Field(None, pattern=HEX_COLOR)
    featured: Optional[bool] = None
    approved: Optional[bool] = None
    training_id: Optional[UUID] = None
    training_name: Optional[str] = Field(None, max_length=200)
    display_order: Optional[int] = None


class TestimonialMessageResponse(BaseModel):
    message: str


def _raise_for_error(error):
    if error.code in ("TESTIMONIAL_NOT_FOUND", "TRAINING_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "INVALID_TRAINING":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=TestimonialListResponse)
async def list_testimonials(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    featured: Optional[bool] = None,
    min_rating: Optional[int] = Query(None, ge=1, le=5),
    training_id: Optional[UUID] = None,
    search: Optional[str] = None,
    sort: TestimonialSort = "-created_at",
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active, approved testimonials."""
    testimonial_filter = TestimonialFilter(
        featured=featured, min_rating=min_rating, training_id=training_id, search=search
    )
    result = await ListTestimonialsUseCase(uow).execute(
        testimonial_filter, page=page, limit=limit, sort=sort
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


# Static paths are registered before /{testimonial_id} so they are matched first


@router.get("/featured", status_code=status.HTTP_200_OK, response_model=TestimonialListResponse)
async def list_featured_testimonials(
    limit: int = Query(6, ge=1, le=50),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListFeaturedTestimonialsUseCase(uow).execute(limit=limit)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/statistics", status_code=status.HTTP_200_OK, response_model=StatisticsResponse)
async def testimonial_statistics(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await TestimonialStatisticsUseCase(uow).execute()
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get(
    "/training/{training_id}",
    status_code=status.HTTP_200_OK,
    response_model=TrainingTestimonialsResponse,
)
async def list_training_testimonials(
    training_id: UUID,
    limit: int = Query(5, ge=1, le=50),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTrainingTestimonialsUseCase(uow).execute(training_id, limit=limit)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get(
    "/{testimonial_id}", status_code=status.HTTP_200_OK, response_model=TestimonialEnvelope
)
async def get_testimonial(testimonial_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetTestimonialUseCase(uow).execute(testimonial_id)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TestimonialEnvelope)
async def create_testimonial(
    request: TestimonialRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: training_id does not reference a course
        - 403 Forbidden: Caller is neither admin nor editor
    """
    result = await CreateTestimonialUseCase(uow).execute(
        CreateTestimonialCommand(**request.model_dump()), created_by=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.put(
    "/{testimonial_id}", status_code=status.HTTP_200_OK, response_model=TestimonialEnvelope
)
async def update_testimonial(
    testimonial_id: UUID,
    request: TestimonialUpdateRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateTestimonialCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateTestimonialUseCase(uow).execute(
        testimonial_id, command, updated_by=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.delete(
    "/{testimonial_id}",
    status_code=status.HTTP_200_OK,
    response_model=TestimonialMessageResponse,
)
async def delete_testimonial(
    testimonial_id: UUID,
    current_user: TokenClaims = Depends(require_roles("admin")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTestimonialUseCase(uow).execute(testimonial_id)
    if result.is_err():
        _raise_for_error(result.error)
    return TestimonialMessageResponse(message=result.value)


@router.patch(
    "/{testimonial_id}/featured",
    status_code=status.HTTP_200_OK,
    response_model=TestimonialEnvelope,
)
async def toggle_testimonial_featured(
    testimonial_id: UUID,
    current_user: TokenClaims = Depends(require_roles("admin")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ToggleTestimonialFeaturedUseCase(uow).execute(
        testimonial_id, updated_by=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value
