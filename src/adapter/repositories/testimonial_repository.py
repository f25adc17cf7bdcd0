from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_raise
from src.app.repositories.testimonial_repository import ITestimonialRepository, TestimonialFilter
from src.domain.base import utcnow
from src.domain.entities import Testimonial

SORT_COLUMNS = {
    "-created_at": (Testimonial.created_at.desc(),),
    "created_at": (Testimonial.created_at.asc(),),
    "-rating": (Testimonial.rating.desc(), Testimonial.created_at.desc()),
    "rating": (Testimonial.rating.asc(), Testimonial.created_at.desc()),
    "display_order": (Testimonial.display_order.asc(), Testimonial.created_at.desc()),
}

VISIBLE = (Testimonial.is_active == True, Testimonial.approved == True)


class TestimonialRepository(ITestimonialRepository):
    """Testimonial repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, testimonial: Testimonial) -> Testimonial:
        self.session.add(testimonial)
        await flush_or_raise(self.session)
        await self.session.refresh(testimonial)
        return testimonial

    async def get_by_id(self, testimonial_id: UUID) -> Optional[Testimonial]:
        stmt = select(Testimonial).where(Testimonial.id == testimonial_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, testimonial: Testimonial) -> Testimonial:
        testimonial.updated_at = utcnow()
        self.session.add(testimonial)
        await flush_or_raise(self.session)
        await self.session.refresh(testimonial)
        return testimonial

    async def delete(self, testimonial: Testimonial) -> None:
        await self.session.delete(testimonial)
        await flush_or_raise(self.session)

    def _visible_conditions(self, testimonial_filter: TestimonialFilter) -> list:
        conditions = list(VISIBLE)
        if testimonial_filter.featured is not None:
            conditions.append(Testimonial.featured == testimonial_filter.featured)
        if testimonial_filter.min_rating is not None:
            conditions.append(Testimonial.rating >= testimonial_filter.min_rating)
        if testimonial_filter.training_id is not None:
            conditions.append(Testimonial.training_id == testimonial_filter.training_id)
        if testimonial_filter.search:
            pattern = f"%{testimonial_filter.search}%"
            conditions.append(
                or_(
                    Testimonial.name.ilike(pattern),
                    Testimonial.role.ilike(pattern),
                    Testimonial.content.ilike(pattern),
                    Testimonial.training_name.ilike(pattern),
                )
            )
        return conditions

    async def list_visible(
        self, testimonial_filter: TestimonialFilter, offset: int, limit: int, sort: str
    ) -> Tuple[List[Testimonial], int]:
        conditions = self._visible_conditions(testimonial_filter)

        count_stmt = select(func.count()).select_from(Testimonial).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        order = SORT_COLUMNS.get(sort, SORT_COLUMNS["-created_at"])
        stmt = select(Testimonial).where(*conditions).order_by(*order).offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all()), total

    async def list_featured(self, limit: int) -> List[Testimonial]:
        stmt = (
            select(Testimonial)
            .where(*VISIBLE, Testimonial.featured == True)
            .order_by(Testimonial.rating.desc(), Testimonial.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_training(self, training_id: UUID, limit: int) -> List[Testimonial]:
        stmt = (
            select(Testimonial)
            .where(*VISIBLE, Testimonial.training_id == training_id)
            .order_by(Testimonial.rating.desc(), Testimonial.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_visible(self, featured: Optional[bool] = None) -> int:
        stmt = select(func.count()).select_from(Testimonial).where(*VISIBLE)
        if featured is not None:
            stmt = stmt.where(Testimonial.featured == featured)
        return (await self.session.exec(stmt)).one()

    async def average_rating(self) -> Optional[float]:
        stmt = select(func.avg(Testimonial.rating)).where(*VISIBLE)
        average = (await self.session.exec(stmt)).one()
        return float(average) if average is not None else None

    async def rating_counts(self) -> List[Tuple[int, int]]:
        count = func.count(Testimonial.id).label("count")
        stmt = (
            select(Testimonial.rating, count)
            .where(*VISIBLE)
            .group_by(Testimonial.rating)
            .order_by(Testimonial.rating.desc())
        )
        result = await self.session.exec(stmt)
        return [(rating, total) for rating, total in result.all()]

    async def list_recent(self, since: datetime, limit: int) -> List[Testimonial]:
        stmt = (
            select(Testimonial)
            .where(*VISIBLE, Testimonial.created_at >= since)
            .order_by(Testimonial.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def top_trainings(self, limit: int) -> List[Tuple[UUID, int]]:
        count = func.count(Testimonial.id).label("count")
        stmt = (
            select(Testimonial.training_id, count)
            .where(*VISIBLE, Testimonial.training_id.is_not(None))
            .group_by(Testimonial.training_id)
            .order_by(count.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return [(training_id, total) for training_id, total in result.all()]
