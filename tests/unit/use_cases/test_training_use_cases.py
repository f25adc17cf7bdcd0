from datetime import date, datetime
from uuid import uuid4

import pytest

from src.app.repositories.training_repository import TrainingFilter
from src.app.use_cases.trainings import (
    AddTrainingSessionUseCase,
    CreateSessionCommand,
    CreateTrainingCommand,
    CreateTrainingUseCase,
    DeleteTrainingSessionUseCase,
    DeleteTrainingUseCase,
    GetTrainingByCodeUseCase,
    ListTrainingCategoriesUseCase,
    ListTrainingsUseCase,
    UpdateSessionCommand,
    UpdateTrainingCommand,
    UpdateTrainingSessionUseCase,
    UpdateTrainingUseCase,
)
from src.app.use_cases.trainings.dtos import format_session_dates
from src.domain.entities import SessionStatus, Training, TrainingCategory, TrainingSession
from src.domain.entities.training import training_code_prefix


def fixed_clock():
    return datetime(2026, 3, 1, 9, 0)


def make_training(**overrides) -> Training:
    fields = dict(
        id=uuid4(),
        title="Occupational Safety and Health",
        slug="occupational-safety-and-health",
        code="OSA-001",
        target_group="Safety officers",
        duration_value=5,
        duration_display="5 Days",
        cost_amount=25000,
        cost_display="KSH 25,000",
    )
    fields.update(overrides)
    return Training(**fields)


def make_session(training_id, start, end, **overrides) -> TrainingSession:
    return TrainingSession(
        id=uuid4(), training_id=training_id, start_date=start, end_date=end, **overrides
    )


def create_command(**overrides) -> CreateTrainingCommand:
    fields = dict(
        title="Occupational Safety and Health",
        target_group="Safety officers",
        duration={"value": 5, "unit": "days", "display": "5 Days"},
        cost={"amount": 25000, "currency": "ksh", "display": "KSH 25,000"},
        sessions=[{"start_date": date(2026, 3, 9), "end_date": date(2026, 3, 13)}],
    )
    fields.update(overrides)
    return CreateTrainingCommand(**fields)


@pytest.mark.parametrize(
    "title, prefix",
    [
        ("Occupational Safety and Health", "OSA"),
        ("First Aid", "FA"),
        ("Firefighting", "FIR"),
        ("42 Things", "T"),
        ("2024", "TRN"),
    ],
)
def test_training_code_prefix(title, prefix):
    assert training_code_prefix(title) == prefix


@pytest.mark.parametrize(
    "start, end, text",
    [
        (date(2026, 3, 5), date(2026, 3, 9), "5th March - 9th March"),
        (date(2026, 3, 1), date(2026, 3, 3), "1st March - 3rd March"),
        (date(2026, 3, 11), date(2026, 3, 22), "11th March - 22nd March"),
        (date(2026, 5, 31), date(2026, 6, 2), "31st May - 2nd June"),
    ],
)
def test_format_session_dates(start, end, text):
    assert format_session_dates(start, end) == text


@pytest.mark.asyncio
async def test_create_training_generates_code_and_sessions(mock_uow):
    mock_uow.trainings.find_by_title.return_value = None
    mock_uow.trainings.count_codes_with_prefix.return_value = 2
    mock_uow.trainings.create.side_effect = lambda training: training
    created = []
    mock_uow.training_sessions.create.side_effect = lambda s: created.append(s) or s
    mock_uow.training_sessions.list_for_training.side_effect = lambda _: list(created)
    author = uuid4()

    result = await CreateTrainingUseCase(mock_uow, clock=fixed_clock).execute(
        create_command(), created_by=author
    )

    assert result.is_ok()
    assert result.value.message == "Training course created successfully"
    training = result.value.training
    assert training.code == "OSA-003"
    assert training.slug == "occupational-safety-and-health"
    assert training.cost.currency == "KSH"
    assert training.registration_fee == 1000.0
    assert training.created_by == str(author)
    assert training.upcoming_sessions == 1
    session = training.sessions[0]
    assert session.venue == "ISTC Training Center"
    assert session.seats.available == 20
    assert session.duration_in_days == 5
    assert session.formatted_dates == "9th March - 13th March"
    mock_uow.trainings.count_codes_with_prefix.assert_called_once_with("OSA")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_training_rejects_duplicate_title(mock_uow):
    mock_uow.trainings.find_by_title.return_value = make_training()

    result = await CreateTrainingUseCase(mock_uow).execute(
        create_command(title="occupational safety and health")
    )

    assert result.error.code == "TRAINING_ALREADY_EXISTS"
    mock_uow.trainings.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "session, code",
    [
        ({"start_date": date(2026, 3, 9), "end_date": date(2026, 3, 8)}, "INVALID_SESSION_DATES"),
        (
            {
                "start_date": date(2026, 3, 9),
                "end_date": date(2026, 3, 10),
                "seats": {"total": 10, "booked": 11},
            },
            "INVALID_SEATS",
        ),
    ],
)
async def test_create_training_validates_sessions(mock_uow, session, code):
    result = await CreateTrainingUseCase(mock_uow).execute(create_command(sessions=[session]))

    assert result.error.code == code
    mock_uow.trainings.find_by_title.assert_not_called()


@pytest.mark.asyncio
async def test_create_training_rejects_title_without_letters(mock_uow):
    result = await CreateTrainingUseCase(mock_uow).execute(create_command(title="!!!"))

    assert result.error.code == "INVALID_TITLE"


@pytest.mark.asyncio
async def test_list_trainings_builds_summaries_inside_unit_of_work(mock_uow):
    training = make_training()
    mock_uow.trainings.list_active.return_value = ([training], 11)
    mock_uow.training_sessions.list_for_trainings.return_value = [
        make_session(training.id, date(2026, 2, 1), date(2026, 2, 3)),
        make_session(training.id, date(2026, 4, 1), date(2026, 4, 3)),
        make_session(
            training.id, date(2026, 5, 1), date(2026, 5, 3), status=SessionStatus.cancelled
        ),
    ]

    result = await ListTrainingsUseCase(mock_uow, clock=fixed_clock).execute(
        TrainingFilter(category="safety"), page=2, limit=5
    )

    page = result.value
    assert page.pagination.total_pages == 3
    assert page.pagination.total_trainings == 11
    assert page.pagination.has_next_page is True
    assert page.pagination.has_prev_page is True
    assert len(page.trainings[0].sessions) == 3
    assert page.trainings[0].upcoming_sessions == 1
    mock_uow.trainings.list_active.assert_called_once_with(
        TrainingFilter(category="safety"), 5, 5, "-created_at"
    )


@pytest.mark.asyncio
async def test_categories_carry_slugs(mock_uow):
    mock_uow.trainings.category_counts.return_value = [("first-aid", 3), ("safety", 1)]

    result = await ListTrainingCategoriesUseCase(mock_uow).execute()

    assert [(c.name, c.count, c.slug) for c in result.value.categories] == [
        ("first-aid", 3, "first-aid"),
        ("safety", 1, "safety"),
    ]


@pytest.mark.asyncio
async def test_get_by_code_misses_inactive(mock_uow):
    mock_uow.trainings.get_active_by_code.return_value = None

    result = await GetTrainingByCodeUseCase(mock_uow).execute("OSA-001")

    assert result.error.code == "TRAINING_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_keeps_code_and_slug(mock_uow):
    training = make_training()
    mock_uow.trainings.get_by_id.return_value = training
    mock_uow.trainings.find_by_title.return_value = None
    mock_uow.trainings.update.side_effect = lambda t: t
    mock_uow.training_sessions.list_for_training.return_value = []

    result = await UpdateTrainingUseCase(mock_uow).execute(
        training.id,
        UpdateTrainingCommand(
            title="Advanced Safety Management",
            category=TrainingCategory.management,
            mode_of_study=["online"],
        ),
    )

    detail = result.value.training
    assert result.value.message == "Training course updated successfully"
    assert detail.title == "Advanced Safety Management"
    assert detail.code == "OSA-001"
    assert detail.slug == "occupational-safety-and-health"
    assert detail.category == TrainingCategory.management
    assert detail.mode_of_study == ["online"]
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_rejects_title_of_other_course(mock_uow):
    training = make_training()
    mock_uow.trainings.get_by_id.return_value = training
    mock_uow.trainings.find_by_title.return_value = make_training(title="First Aid")

    result = await UpdateTrainingUseCase(mock_uow).execute(
        training.id, UpdateTrainingCommand(title="First Aid")
    )

    assert result.error.code == "TRAINING_ALREADY_EXISTS"
    mock_uow.trainings.find_by_title.assert_called_once_with("First Aid", exclude_id=training.id)
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_training_deactivates(mock_uow):
    training = make_training()
    mock_uow.trainings.get_by_id.return_value = training

    result = await DeleteTrainingUseCase(mock_uow).execute(training.id)

    assert result.value == "Training course deleted successfully"
    assert training.is_active is False
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_add_session_rejects_overlap(mock_uow):
    training = make_training()
    mock_uow.trainings.get_by_id.return_value = training
    mock_uow.training_sessions.list_for_training.return_value = [
        make_session(training.id, date(2026, 3, 9), date(2026, 3, 13))
    ]

    result = await AddTrainingSessionUseCase(mock_uow).execute(
        training.id,
        CreateSessionCommand(start_date=date(2026, 3, 13), end_date=date(2026, 3, 15)),
    )

    assert result.error.code == "SESSION_OVERLAP"
    mock_uow.training_sessions.create.assert_not_called()


@pytest.mark.asyncio
async def test_add_session_ignores_cancelled_dates(mock_uow):
    training = make_training()
    cancelled = make_session(
        training.id, date(2026, 3, 9), date(2026, 3, 13), status=SessionStatus.cancelled
    )
    mock_uow.trainings.get_by_id.return_value = training
    mock_uow.trainings.update.side_effect = lambda t: t
    mock_uow.training_sessions.create.side_effect = lambda s: s
    mock_uow.training_sessions.list_for_training.return_value = [cancelled]

    result = await AddTrainingSessionUseCase(mock_uow, clock=fixed_clock).execute(
        training.id,
        CreateSessionCommand(start_date=date(2026, 3, 10), end_date=date(2026, 3, 12)),
    )

    assert result.is_ok()
    assert result.value.message == "Session added successfully"
    mock_uow.training_sessions.create.assert_called_once()


@pytest.mark.asyncio
async def test_update_session_checks_seats_against_total(mock_uow):
    training = make_training()
    session = make_session(training.id, date(2026, 3, 9), date(2026, 3, 13), seats_booked=15)
    mock_uow.trainings.get_by_id.return_value = training
    mock_uow.training_sessions.get.return_value = session

    result = await UpdateTrainingSessionUseCase(mock_uow).execute(
        training.id, session.id, UpdateSessionCommand(seats={"total": 10})
    )

    assert result.error.code == "INVALID_SEATS"
    assert session.seats_total == 20
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_session_skips_overlap_check_without_new_dates(mock_uow):
    training = make_training()
    session = make_session(training.id, date(2026, 3, 9), date(2026, 3, 13))
    mock_uow.trainings.get_by_id.return_value = training
    mock_uow.trainings.update.side_effect = lambda t: t
    mock_uow.training_sessions.get.return_value = session
    mock_uow.training_sessions.list_for_training.return_value = [session]

    result = await UpdateTrainingSessionUseCase(mock_uow, clock=fixed_clock).execute(
        training.id, session.id, UpdateSessionCommand(status="ongoing", instructor="J. Otieno")
    )

    assert result.value.message == "Session updated successfully"
    assert session.status == SessionStatus.ongoing
    assert session.instructor == "J. Otieno"
    mock_uow.training_sessions.list_for_training.assert_called_once()


@pytest.mark.asyncio
async def test_delete_unknown_session(mock_uow):
    mock_uow.trainings.get_by_id.return_value = make_training()
    mock_uow.training_sessions.get.return_value = None

    result = await DeleteTrainingSessionUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.error.code == "SESSION_NOT_FOUND"
    mock_uow.training_sessions.delete.assert_not_called()
