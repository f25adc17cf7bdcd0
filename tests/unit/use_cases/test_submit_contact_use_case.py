from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.contact import SubmitContactCommand, SubmitContactUseCase
from src.domain.entities import Contact

NOW = datetime(2025, 3, 1, 9, 0, 0)


@pytest.fixture
def use_case(mock_uow, email_sender, settings):
    return SubmitContactUseCase(mock_uow, email_sender, settings, clock=lambda: NOW)


@pytest.fixture
def command():
    return SubmitContactCommand(
        name="Carol Pham",
        email="carol@example.com",
        subject="Course schedule",
        message="When does the next cohort start?",
    )


@pytest.mark.asyncio
async def test_submit_contact(use_case, mock_uow, email_sender, settings, command):
    mock_uow.contacts.get_recent_by_email.return_value = None
    mock_uow.contacts.create.side_effect = lambda contact: contact

    result = await use_case.execute(command)

    assert result.is_ok()
    mock_uow.contacts.get_recent_by_email.assert_called_once_with(
        "carol@example.com", since=NOW - timedelta(minutes=5)
    )
    stored = mock_uow.contacts.create.call_args.args[0]
    assert result.value.contact_id == str(stored.id)
    assert stored.created_at == NOW
    mock_uow.commit.assert_called_once()

    recipients = [call.args[0] for call in email_sender.send.call_args_list]
    assert recipients == ["carol@example.com", settings.ADMIN_EMAIL]


@pytest.mark.asyncio
async def test_submit_contact_rate_limited(use_case, mock_uow, email_sender, command):
    mock_uow.contacts.get_recent_by_email.return_value = Contact(
        id=uuid4(),
        name="Carol Pham",
        email="carol@example.com",
        subject="Earlier",
        message="Earlier message",
        created_at=NOW - timedelta(minutes=2),
    )

    result = await use_case.execute(command)

    assert result.is_err()
    assert result.error.code == "RATE_LIMITED"
    mock_uow.contacts.create.assert_not_called()
    email_sender.send.assert_not_called()
