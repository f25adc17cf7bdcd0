from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CategoriesResponse, CategoryCount


class ListBlogCategoriesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[CategoriesResponse]:
        async with self.uow:
            counts = await self.uow.blogs.category_counts()
        return Return.ok(
            CategoriesResponse(
                categories=[CategoryCount(name=name, count=count) for name, count in counts]
            )
        )
