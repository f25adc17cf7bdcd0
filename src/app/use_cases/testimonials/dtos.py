"""
Testimonial Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Testimonial
from src.domain.entities.testimonial import company_from_role, initials


class CreateTestimonialCommand(BaseModel):
    name: str
    role: str
    content: str
    rating: int = 5
    company: Optional[str] = None
    image: Optional[str] = None
    avatar_color: Optional[str] = None
    featured: bool = False
    training_id: Optional[UUID] = None
    training_name: Optional[str] = None
    display_order: int = 0


class UpdateTestimonialCommand(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    content: Optional[str] = None
    rating: Optional[int] = None
    company: Optional[str] = None
    image: Optional[str] = None
    avatar_color: Optional[str] = None
    featured: Optional[bool] = None
    approved: Optional[bool] = None
    training_id: Optional[UUID] = None
    training_name: Optional[str] = None
    display_order: Optional[int] = None


class TestimonialInfo(BaseModel):
    id: str
    name: str
    role: str
    company: Optional[str] = None
    content: str
    rating: int
    image: str
    avatar_color: str
    featured: bool
    training_id: Optional[str] = None
    training_name: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, testimonial: Testimonial) -> "TestimonialInfo":
        return cls(
            id=str(testimonial.id),
            name=testimonial.name,
            role=testimonial.role,
            company=testimonial.company or company_from_role(testimonial.role),
            content=testimonial.content,
            rating=testimonial.rating,
            image=testimonial.image or initials(testimonial.name),
            avatar_color=testimonial.avatar_color,
            featured=testimonial.featured,
            training_id=str(testimonial.training_id) if testimonial.training_id else None,
            training_name=testimonial.training_name,
            is_active=testimonial.is_active,
            created_at=testimonial.created_at,
            updated_at=testimonial.updated_at,
        )


class TestimonialEnvelope(BaseModel):
    message: Optional[str] = None
    testimonial: TestimonialInfo


class TestimonialPagination(BaseModel):
    current_page: int
    total_pages: int
    total_testimonials: int
    has_next_page: bool
    has_prev_page: bool


class TestimonialListResponse(BaseModel):
    testimonials: List[TestimonialInfo]
    pagination: Optional[TestimonialPagination] = None


class TrainingReference(BaseModel):
    id: str
    title: str
    code: str


class TrainingTestimonialsResponse(BaseModel):
    training: TrainingReference
    testimonials: List[TestimonialInfo]
    count: int


class RatingBucket(BaseModel):
    rating: int
    count: int
    percentage: int


class RecentTestimonial(BaseModel):
    name: str
    role: str
    rating: int
    date: datetime


class TrainingTestimonialCount(BaseModel):
    training_id: str
    training_name: str
    training_code: Optional[str] = None
    testimonial_count: int


class TestimonialStatistics(BaseModel):
    total_testimonials: int
    featured_count: int
    average_rating: float
    rating_distribution: List[RatingBucket]
    recent_testimonials: List[RecentTestimonial]
    top_trainings: List[TrainingTestimonialCount]


class StatisticsResponse(BaseModel):
    statistics: TestimonialStatistics
