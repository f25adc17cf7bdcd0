from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import TrainingEnvelope, UpdateTrainingCommand
from .errors import DUPLICATE_TRAINING, TRAINING_NOT_FOUND
from .scheduling import load_detail


class UpdateTrainingUseCase:
    """
    Partial course update.

    code and slug stay as generated at creation, even when the title
    changes. A renamed course must not clash with another title.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        training_id: UUID,
        command: UpdateTrainingCommand,
        updated_by: Optional[UUID] = None,
    ) -> Result[TrainingEnvelope]:
        changes = command.model_dump(exclude_unset=True, exclude_none=True)
        duration = changes.pop("duration", None)
        cost = changes.pop("cost", None)

        async with self.uow:
            training = await self.uow.trainings.get_by_id(training_id)
            if training is None:
                return Return.err(TRAINING_NOT_FOUND)

            title = changes.get("title")
            if title is not None and title.strip().lower() != training.title.lower():
                clash = await self.uow.trainings.find_by_title(title, exclude_id=training.id)
                if clash is not None:
                    return Return.err(DUPLICATE_TRAINING)
                changes["title"] = title.strip()

            if "mode_of_study" in changes:
                changes["mode_of_study"] = [mode.value for mode in command.mode_of_study]
            if duration is not None:
                training.duration_value = duration["value"]
                training.duration_unit = duration["unit"]
                training.duration_display = duration["display"]
            if cost is not None:
                training.cost_amount = cost["amount"]
                training.cost_currency = cost["currency"].upper()
                training.cost_display = cost["display"]
                training.cost_tax_inclusive = cost["tax_inclusive"]

            for field, value in changes.items():
                setattr(training, field, value)
            training.updated_by = updated_by

            try:
                training = await self.uow.trainings.update(training)
            except DuplicateKeyError:
                return Return.err(DUPLICATE_TRAINING)

            await self.uow.commit()

            detail = await load_detail(self.uow, training, self.clock().date())
            return Return.ok(
                TrainingEnvelope(message="Training course updated successfully", training=detail)
            )
