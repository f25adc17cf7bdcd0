from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import String, cast, func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_raise
from src.app.repositories.training_repository import (
    ITrainingRepository,
    ITrainingSessionRepository,
    TrainingFilter,
)
from src.domain.base import utcnow
from src.domain.entities import Training, TrainingSession

SORT_COLUMNS = {
    "-created_at": Training.created_at.desc(),
    "created_at": Training.created_at.asc(),
    "title": Training.title.asc(),
    "-title": Training.title.desc(),
    "registration_fee": Training.registration_fee.asc(),
    "-registration_fee": Training.registration_fee.desc(),
}


class TrainingRepository(ITrainingRepository):
    """Training repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, training: Training) -> Training:
        self.session.add(training)
        await flush_or_raise(self.session)
        await self.session.refresh(training)
        return training

    async def get_by_id(self, training_id: UUID) -> Optional[Training]:
        stmt = select(Training).where(Training.id == training_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_code(self, code: str) -> Optional[Training]:
        stmt = select(Training).where(Training.code == code.upper(), Training.is_active == True)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_title(
        self, title: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Training]:
        stmt = select(Training).where(func.lower(Training.title) == title.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(Training.id != exclude_id)
        result = await self.session.exec(stmt.limit(1))
        return result.first()

    async def count_codes_with_prefix(self, prefix: str) -> int:
        stmt = select(func.count()).select_from(Training).where(Training.code.like(f"{prefix}-%"))
        return (await self.session.exec(stmt)).one()

    async def get_many(self, training_ids: List[UUID]) -> List[Training]:
        if not training_ids:
            return []
        stmt = select(Training).where(Training.id.in_(training_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, training: Training) -> Training:
        training.updated_at = utcnow()
        self.session.add(training)
        await flush_or_raise(self.session)
        await self.session.refresh(training)
        return training

    def _active_conditions(self, training_filter: TrainingFilter) -> list:
        conditions = [Training.is_active == True]
        if training_filter.category:
            conditions.append(Training.category == training_filter.category)
        if training_filter.mode_of_study:
            # JSON list is compared through its text form: ["full-time", "online"]
            pattern = f'%"{training_filter.mode_of_study}"%'
            conditions.append(cast(Training.mode_of_study, String).like(pattern))
        if training_filter.featured is not None:
            conditions.append(Training.is_featured == training_filter.featured)
        if training_filter.search:
            pattern = f"%{training_filter.search}%"
            conditions.append(
                or_(
                    Training.title.ilike(pattern),
                    Training.description.ilike(pattern),
                    Training.code.ilike(pattern),
                    Training.target_group.ilike(pattern),
                )
            )
        if training_filter.start_date or training_filter.end_date:
            sessions = select(TrainingSession.training_id)
            if training_filter.start_date:
                sessions = sessions.where(TrainingSession.start_date >= training_filter.start_date)
            if training_filter.end_date:
                sessions = sessions.where(TrainingSession.start_date <= training_filter.end_date)
            conditions.append(Training.id.in_(sessions))
        return conditions

    async def list_active(
        self, training_filter: TrainingFilter, offset: int, limit: int, sort: str
    ) -> Tuple[List[Training], int]:
        conditions = self._active_conditions(training_filter)

        count_stmt = select(func.count()).select_from(Training).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        order = SORT_COLUMNS.get(sort, SORT_COLUMNS["-created_at"])
        stmt = select(Training).where(*conditions).order_by(order).offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all()), total

    async def list_featured(self, limit: int) -> List[Training]:
        stmt = (
            select(Training)
            .where(Training.is_featured == True, Training.is_active == True)
            .order_by(Training.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_upcoming(self, since: date, limit: int) -> List[Training]:
        next_start = (
            select(
                TrainingSession.training_id,
                func.min(TrainingSession.start_date).label("next_start"),
            )
            .where(TrainingSession.start_date >= since)
            .group_by(TrainingSession.training_id)
            .subquery()
        )
        stmt = (
            select(Training)
            .join(next_start, Training.id == next_start.c.training_id)
            .where(Training.is_active == True)
            .order_by(next_start.c.next_start, Training.title)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def category_counts(self) -> List[Tuple[str, int]]:
        count = func.count(Training.id).label("count")
        stmt = (
            select(Training.category, count)
            .where(Training.is_active == True)
            .group_by(Training.category)
            .order_by(count.desc(), Training.category)
        )
        result = await self.session.exec(stmt)
        return [(getattr(category, "value", category), total) for category, total in result.all()]


class TrainingSessionRepository(ITrainingSessionRepository):
    """Training session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session: TrainingSession) -> TrainingSession:
        self.session.add(session)
        await flush_or_raise(self.session)
        await self.session.refresh(session)
        return session

    async def get(self, training_id: UUID, session_id: UUID) -> Optional[TrainingSession]:
        stmt = select(TrainingSession).where(
            TrainingSession.id == session_id, TrainingSession.training_id == training_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_training(self, training_id: UUID) -> List[TrainingSession]:
        stmt = (
            select(TrainingSession)
            .where(TrainingSession.training_id == training_id)
            .order_by(TrainingSession.start_date)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_trainings(self, training_ids: List[UUID]) -> List[TrainingSession]:
        if not training_ids:
            return []
        stmt = (
            select(TrainingSession)
            .where(TrainingSession.training_id.in_(training_ids))
            .order_by(TrainingSession.start_date)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, session: TrainingSession) -> TrainingSession:
        self.session.add(session)
        await flush_or_raise(self.session)
        await self.session.refresh(session)
        return session

    async def delete(self, session: TrainingSession) -> None:
        await self.session.delete(session)
        await flush_or_raise(self.session)
