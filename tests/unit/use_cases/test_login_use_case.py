import pytest

from src.app.use_cases.auth import LoginUseCase


@pytest.fixture
def use_case(mock_uow, token_service, settings):
    return LoginUseCase(mock_uow, token_service, settings)


@pytest.mark.asyncio
async def test_successful_login(use_case, mock_uow, token_service, make_user):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    result = await use_case.execute("alice@example.com", "Str0ng!Pass")

    assert result.is_ok()
    assert result.value.message == "Login successful"
    assert result.value.token == "signed-token"
    assert result.value.user.last_login_at is not None
    token_service.issue.assert_called_once_with(user)
    mock_uow.users.set_last_login.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_login_wrong_password(use_case, mock_uow, token_service, make_user):
    mock_uow.users.get_by_email.return_value = make_user()

    result = await use_case.execute("alice@example.com", "Wr0ng!Pass")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid credentials"
    token_service.issue.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_email(use_case, mock_uow):
    mock_uow.users.get_by_email.return_value = None

    result = await use_case.execute("nobody@example.com", "Str0ng!Pass")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_deactivated(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user(is_active=False)

    result = await use_case.execute("alice@example.com", "Str0ng!Pass")

    assert result.is_err()
    assert result.error.code == "ACCOUNT_DEACTIVATED"


@pytest.mark.asyncio
async def test_login_survives_last_login_write_failure(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user()
    mock_uow.users.set_last_login.side_effect = RuntimeError("database is locked")

    result = await use_case.execute("alice@example.com", "Str0ng!Pass")

    assert result.is_ok()
    assert result.value.user.last_login_at is None
    mock_uow.rollback.assert_called_once()
