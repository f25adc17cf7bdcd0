from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_raise
from src.app.repositories.blog_repository import BlogFilter, IBlogRepository
from src.domain.base import utcnow
from src.domain.entities import Blog

SORT_COLUMNS = {
    "-created_at": Blog.created_at.desc(),
    "created_at": Blog.created_at.asc(),
    "-views": Blog.views.desc(),
    "-likes": Blog.likes.desc(),
    "title": Blog.title.asc(),
}


class BlogRepository(IBlogRepository):
    """Blog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, blog: Blog) -> Blog:
        self.session.add(blog)
        await flush_or_raise(self.session)
        await self.session.refresh(blog)
        return blog

    async def get_by_id(self, blog_id: UUID) -> Optional[Blog]:
        stmt = select(Blog).where(Blog.id == blog_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Blog]:
        stmt = select(Blog).where(Blog.slug == slug)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, blog: Blog) -> Blog:
        blog.updated_at = utcnow()
        self.session.add(blog)
        await flush_or_raise(self.session)
        await self.session.refresh(blog)
        return blog

    async def delete(self, blog: Blog) -> None:
        await self.session.delete(blog)
        await flush_or_raise(self.session)

    def _published_conditions(self, blog_filter: BlogFilter) -> list:
        conditions = [Blog.published == True]
        if blog_filter.category:
            conditions.append(Blog.category == blog_filter.category)
        if blog_filter.featured is not None:
            conditions.append(Blog.featured == blog_filter.featured)
        if blog_filter.search:
            pattern = f"%{blog_filter.search}%"
            conditions.append(
                or_(
                    Blog.title.ilike(pattern),
                    Blog.excerpt.ilike(pattern),
                    Blog.content.ilike(pattern),
                )
            )
        return conditions

    async def list_published(
        self, blog_filter: BlogFilter, offset: int, limit: int, sort: str
    ) -> Tuple[List[Blog], int]:
        conditions = self._published_conditions(blog_filter)

        count_stmt = select(func.count()).select_from(Blog).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        order = SORT_COLUMNS.get(sort, SORT_COLUMNS["-created_at"])
        stmt = select(Blog).where(*conditions).order_by(order).offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all()), total

    async def list_featured(self, limit: int) -> List[Blog]:
        stmt = (
            select(Blog)
            .where(Blog.featured == True, Blog.published == True)
            .order_by(Blog.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def category_counts(self) -> List[Tuple[str, int]]:
        count = func.count(Blog.id).label("count")
        stmt = (
            select(Blog.category, count)
            .where(Blog.published == True)
            .group_by(Blog.category)
            .order_by(count.desc(), Blog.category)
        )
        result = await self.session.exec(stmt)
        return [(category, total) for category, total in result.all()]

    async def increment_views(self, blog_id: UUID) -> None:
        stmt = update(Blog).where(Blog.id == blog_id).values(views=Blog.views + 1)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_likes(self, blog_id: UUID) -> Optional[int]:
        stmt = update(Blog).where(Blog.id == blog_id).values(likes=Blog.likes + 1)
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None
        likes = await self.session.exec(select(Blog.likes).where(Blog.id == blog_id))
        return likes.one()
