from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Testimonial


@dataclass(frozen=True)
class TestimonialFilter:
    featured: Optional[bool] = None
    min_rating: Optional[int] = None
    training_id: Optional[UUID] = None
    search: Optional[str] = None


class ITestimonialRepository(ABC):
    """
    Testimonial repository interface - application layer

    "Visible" means active and approved; every listing and statistic below
    only considers visible testimonials.
    """

    @abstractmethod
    async def create(self, testimonial: Testimonial) -> Testimonial:
        pass

    @abstractmethod
    async def get_by_id(self, testimonial_id: UUID) -> Optional[Testimonial]:
        pass

    @abstractmethod
    async def update(self, testimonial: Testimonial) -> Testimonial:
        pass

    @abstractmethod
    async def delete(self, testimonial: Testimonial) -> None:
        pass

    @abstractmethod
    async def list_visible(
        self, testimonial_filter: TestimonialFilter, offset: int, limit: int, sort: str
    ) -> Tuple[List[Testimonial], int]:
        pass

    @abstractmethod
    async def list_featured(self, limit: int) -> List[Testimonial]:
        """Highest rated first, then newest"""
        pass

    @abstractmethod
    async def list_for_training(self, training_id: UUID, limit: int) -> List[Testimonial]:
        pass

    @abstractmethod
    async def count_visible(self, featured: Optional[bool] = None) -> int:
        pass

    @abstractmethod
    async def average_rating(self) -> Optional[float]:
        pass

    @abstractmethod
    async def rating_counts(self) -> List[Tuple[int, int]]:
        """(rating, count), highest rating first"""
        pass

    @abstractmethod
    async def list_recent(self, since: datetime, limit: int) -> List[Testimonial]:
        pass

    @abstractmethod
    async def top_trainings(self, limit: int) -> List[Tuple[UUID, int]]:
        """(training_id, count) for courses with the most testimonials"""
        pass
