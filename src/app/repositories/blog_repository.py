from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Blog


@dataclass(frozen=True)
class BlogFilter:
    category: Optional[str] = None
    featured: Optional[bool] = None
    search: Optional[str] = None


class IBlogRepository(ABC):
    """Blog repository interface - application layer"""

    @abstractmethod
    async def create(self, blog: Blog) -> Blog:
        """Create a blog; raises DuplicateKeyError on slug clash"""
        pass

    @abstractmethod
    async def get_by_id(self, blog_id: UUID) -> Optional[Blog]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Blog]:
        pass

    @abstractmethod
    async def update(self, blog: Blog) -> Blog:
        pass

    @abstractmethod
    async def delete(self, blog: Blog) -> None:
        pass

    @abstractmethod
    async def list_published(
        self, blog_filter: BlogFilter, offset: int, limit: int, sort: str
    ) -> Tuple[List[Blog], int]:
        """Return one page of published blogs and the total match count"""
        pass

    @abstractmethod
    async def list_featured(self, limit: int) -> List[Blog]:
        pass

    @abstractmethod
    async def category_counts(self) -> List[Tuple[str, int]]:
        """(category, count) for published blogs, most common first"""
        pass

    @abstractmethod
    async def increment_views(self, blog_id: UUID) -> None:
        pass

    @abstractmethod
    async def increment_likes(self, blog_id: UUID) -> Optional[int]:
        """Atomically add one like; returns the new count or None if missing"""
        pass
