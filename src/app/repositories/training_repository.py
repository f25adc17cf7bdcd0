from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Training, TrainingSession


@dataclass(frozen=True)
class TrainingFilter:
    category: Optional[str] = None
    mode_of_study: Optional[str] = None
    featured: Optional[bool] = None
    search: Optional[str] = None
    # Courses with at least one session starting inside [start_date, end_date]
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ITrainingRepository(ABC):
    """Training repository interface - application layer"""

    @abstractmethod
    async def create(self, training: Training) -> Training:
        """Create a course; raises DuplicateKeyError on slug or code clash"""
        pass

    @abstractmethod
    async def get_by_id(self, training_id: UUID) -> Optional[Training]:
        pass

    @abstractmethod
    async def get_active_by_code(self, code: str) -> Optional[Training]:
        pass

    @abstractmethod
    async def find_by_title(
        self, title: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Training]:
        """Case-insensitive exact title match"""
        pass

    @abstractmethod
    async def count_codes_with_prefix(self, prefix: str) -> int:
        pass

    @abstractmethod
    async def get_many(self, training_ids: List[UUID]) -> List[Training]:
        pass

    @abstractmethod
    async def update(self, training: Training) -> Training:
        pass

    @abstractmethod
    async def list_active(
        self, training_filter: TrainingFilter, offset: int, limit: int, sort: str
    ) -> Tuple[List[Training], int]:
        """Return one page of active courses and the total match count"""
        pass

    @abstractmethod
    async def list_featured(self, limit: int) -> List[Training]:
        pass

    @abstractmethod
    async def list_upcoming(self, since: date, limit: int) -> List[Training]:
        """Active courses with a session starting on or after `since`, soonest first"""
        pass

    @abstractmethod
    async def category_counts(self) -> List[Tuple[str, int]]:
        """(category, count) for active courses, most common first"""
        pass


class ITrainingSessionRepository(ABC):
    """Training session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: TrainingSession) -> TrainingSession:
        pass

    @abstractmethod
    async def get(self, training_id: UUID, session_id: UUID) -> Optional[TrainingSession]:
        pass

    @abstractmethod
    async def list_for_training(self, training_id: UUID) -> List[TrainingSession]:
        """Sessions of one course ordered by start date"""
        pass

    @abstractmethod
    async def list_for_trainings(self, training_ids: List[UUID]) -> List[TrainingSession]:
        pass

    @abstractmethod
    async def update(self, session: TrainingSession) -> TrainingSession:
        pass

    @abstractmethod
    async def delete(self, session: TrainingSession) -> None:
        pass
