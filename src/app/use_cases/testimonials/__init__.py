"""
Testimonial Use Cases
"""

from .create_testimonial_use_case import CreateTestimonialUseCase
from .list_testimonials_use_case import ListTestimonialsUseCase, ListFeaturedTestimonialsUseCase
from .list_training_testimonials_use_case import ListTrainingTestimonialsUseCase
from .get_testimonial_use_case import GetTestimonialUseCase
from .update_testimonial_use_case import UpdateTestimonialUseCase
from .delete_testimonial_use_case import DeleteTestimonialUseCase
from .toggle_featured_use_case import ToggleTestimonialFeaturedUseCase
from .testimonial_statistics_use_case import TestimonialStatisticsUseCase
from .dtos import (
    CreateTestimonialCommand,
    UpdateTestimonialCommand,
    TestimonialEnvelope,
    TestimonialListResponse,
    TrainingTestimonialsResponse,
    StatisticsResponse,
)

__all__ = [
    "CreateTestimonialUseCase",
    "ListTestimonialsUseCase",
    "ListFeaturedTestimonialsUseCase",
    "ListTrainingTestimonialsUseCase",
    "GetTestimonialUseCase",
    "UpdateTestimonialUseCase",
    "DeleteTestimonialUseCase",
    "ToggleTestimonialFeaturedUseCase",
    "TestimonialStatisticsUseCase",
    "CreateTestimonialCommand",
    "UpdateTestimonialCommand",
    "TestimonialEnvelope",
    "TestimonialListResponse",
    "TrainingTestimonialsResponse",
    "StatisticsResponse",
]
