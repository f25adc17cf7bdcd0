from datetime import datetime, timedelta
from typing import Callable

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import (
    RatingBucket,
    RecentTestimonial,
    StatisticsResponse,
    TestimonialStatistics,
    TrainingTestimonialCount,
)

RECENT_WINDOW = timedelta(days=30)
RECENT_LIMIT = 5
TOP_TRAININGS_LIMIT = 5


class TestimonialStatisticsUseCase:
    """
    Aggregates over visible testimonials.

    Percentages in the rating distribution are rounded half up, so they may
    not add up to exactly 100.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[StatisticsResponse]:
        async with self.uow:
            total = await self.uow.testimonials.count_visible()
            featured = await self.uow.testimonials.count_visible(featured=True)
            average = await self.uow.testimonials.average_rating()
            rating_counts = await self.uow.testimonials.rating_counts()
            recent = await self.uow.testimonials.list_recent(
                self.clock() - RECENT_WINDOW, RECENT_LIMIT
            )
            top = await self.uow.testimonials.top_trainings(TOP_TRAININGS_LIMIT)
            trainings = {
                t.id: t for t in await self.uow.trainings.get_many([tid for tid, _ in top])
            }

            rated = sum(count for _, count in rating_counts)
            distribution = [
                RatingBucket(
                    rating=rating,
                    count=count,
                    percentage=int(count * 100 / rated + 0.5) if rated else 0,
                )
                for rating, count in rating_counts
            ]
            top_trainings = []
            for training_id, count in top:
                training = trainings.get(training_id)
                top_trainings.append(
                    TrainingTestimonialCount(
                        training_id=str(training_id),
                        training_name=training.title if training else "Unknown Training",
                        training_code=training.code if training else None,
                        testimonial_count=count,
                    )
                )

            return Return.ok(
                StatisticsResponse(
                    statistics=TestimonialStatistics(
                        total_testimonials=total,
                        featured_count=featured,
                        average_rating=round(average or 0.0, 1),
                        rating_distribution=distribution,
                        recent_testimonials=[
                            RecentTestimonial(
                                name=t.name, role=t.role, rating=t.rating, date=t.created_at
                            )
                            for t in recent
                        ],
                        top_trainings=top_trainings,
                    )
                )
            )
