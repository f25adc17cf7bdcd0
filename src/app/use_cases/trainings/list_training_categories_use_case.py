from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import slugify
from .dtos import TrainingCategoriesResponse, TrainingCategoryCount


class ListTrainingCategoriesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[TrainingCategoriesResponse]:
        async with self.uow:
            counts = await self.uow.trainings.category_counts()
        return Return.ok(
            TrainingCategoriesResponse(
                categories=[
                    TrainingCategoryCount(name=name, count=count, slug=slugify(name))
                    for name, count in counts
                ]
            )
        )
