import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Training, TrainingSession, slugify, training_code_prefix
from src.domain.entities.training import (
    DEFAULT_CERTIFICATION,
    DEFAULT_REGISTRATION_FEE,
    DEFAULT_VENUE,
)
from .dtos import CreateTrainingCommand, TrainingEnvelope
from .errors import DUPLICATE_TRAINING, INVALID_TITLE
from .scheduling import check_session, load_detail

logger = logging.getLogger(__name__)


class CreateTrainingUseCase:
    """
    Create a course together with its initial sessions.

    Business Rules:
    - Title is unique ignoring case (TRAINING_ALREADY_EXISTS)
    - Every session ends on or after its start and books no more seats
      than it has
    - code is PREFIX-NNN where PREFIX comes from the title and NNN counts
      the courses already using that prefix
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, command: CreateTrainingCommand, created_by: Optional[UUID] = None
    ) -> Result[TrainingEnvelope]:
        slug = slugify(command.title)
        if not slug:
            return Return.err(INVALID_TITLE)

        for session in command.sessions:
            checked = check_session(
                session.start_date, session.end_date, session.seats.total, session.seats.booked
            )
            if checked.is_err():
                return Return.err(checked.error)

        async with self.uow:
            if await self.uow.trainings.find_by_title(command.title) is not None:
                return Return.err(DUPLICATE_TRAINING)

            prefix = training_code_prefix(command.title)
            sequence = await self.uow.trainings.count_codes_with_prefix(prefix) + 1

            training = Training(
                title=command.title.strip(),
                slug=slug,
                code=f"{prefix}-{sequence:03d}",
                description=command.description,
                target_group=command.target_group,
                duration_value=command.duration.value,
                duration_unit=command.duration.unit,
                duration_display=command.duration.display,
                cost_amount=command.cost.amount,
                cost_currency=command.cost.currency.upper(),
                cost_display=command.cost.display,
                cost_tax_inclusive=command.cost.tax_inclusive,
                category=command.category,
                mode_of_study=[mode.value for mode in command.mode_of_study],
                prerequisites=list(command.prerequisites),
                learning_outcomes=list(command.learning_outcomes),
                requirements=list(command.requirements),
                certification=command.certification or DEFAULT_CERTIFICATION,
                is_featured=command.is_featured,
                registration_fee=(
                    command.registration_fee
                    if command.registration_fee is not None
                    else DEFAULT_REGISTRATION_FEE
                ),
                created_by=created_by,
            )
            try:
                training = await self.uow.trainings.create(training)
            except DuplicateKeyError:
                return Return.err(DUPLICATE_TRAINING)

            for session in command.sessions:
                await self.uow.training_sessions.create(
                    TrainingSession(
                        training_id=training.id,
                        start_date=session.start_date,
                        end_date=session.end_date,
                        status=session.status,
                        seats_total=session.seats.total,
                        seats_booked=session.seats.booked,
                        venue=session.venue or DEFAULT_VENUE,
                        instructor=session.instructor,
                    )
                )

            await self.uow.commit()
            logger.info("Created training %s (%s)", training.code, training.id)

            detail = await load_detail(self.uow, training, self.clock().date())
            return Return.ok(
                TrainingEnvelope(message="Training course created successfully", training=detail)
            )
