from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.services.passwords import verify_password
from src.app.services.reset_token_ledger import hash_reset_token
from src.app.use_cases.auth import (
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    VerifyResetTokenUseCase,
)
from src.domain.entities import PasswordResetToken

NOW = datetime(2025, 3, 1, 9, 0, 0)
TOKEN = "f" * 64


def clock():
    return NOW


def reset_record(user_id, used=False, expires_at=None) -> PasswordResetToken:
    return PasswordResetToken(
        id=uuid4(),
        user_id=user_id,
        token_hash=hash_reset_token(TOKEN),
        used=used,
        expires_at=expires_at or NOW + timedelta(minutes=10),
        created_at=NOW - timedelta(minutes=5),
    )


class TestForgotPassword:
    @pytest.fixture
    def use_case(self, mock_uow, email_sender, settings):
        return ForgotPasswordUseCase(mock_uow, email_sender, settings, clock=clock)

    @pytest.mark.asyncio
    async def test_sends_reset_link(self, use_case, mock_uow, email_sender, make_user):
        user = make_user()
        mock_uow.users.get_by_email.return_value = user
        mock_uow.password_reset_tokens.get_outstanding_since.return_value = None

        result = await use_case.execute("alice@example.com", ip_address="10.0.0.1", user_agent="pytest")

        assert result.is_ok()
        stored = mock_uow.password_reset_tokens.create.call_args.args[0]
        assert stored.user_id == user.id
        assert stored.ip_address == "10.0.0.1"
        assert stored.expires_at == NOW + timedelta(minutes=15)
        mock_uow.commit.assert_called_once()

        to, subject, html = email_sender.send.call_args.args
        assert to == user.email
        assert subject == "Password Reset Request"
        assert "http://frontend.test/reset-password?token=" in html
        token = html.split("token=")[1][:64]
        assert hash_reset_token(token) == stored.token_hash

    @pytest.mark.asyncio
    async def test_unknown_email_gets_same_response(self, use_case, mock_uow, email_sender, make_user):
        mock_uow.users.get_by_email.return_value = None
        unknown = await use_case.execute("ghost@example.com")

        mock_uow.users.get_by_email.return_value = make_user()
        mock_uow.password_reset_tokens.get_outstanding_since.return_value = None
        known = await use_case.execute("alice@example.com")

        assert unknown.value == known.value
        assert email_sender.send.call_count == 1

    @pytest.mark.asyncio
    async def test_rate_limited(self, use_case, mock_uow, email_sender, make_user):
        user = make_user()
        mock_uow.users.get_by_email.return_value = user
        mock_uow.password_reset_tokens.get_outstanding_since.return_value = reset_record(user.id)

        result = await use_case.execute("alice@example.com")

        assert result.is_err()
        assert result.error.code == "RATE_LIMITED"
        mock_uow.password_reset_tokens.create.assert_not_called()
        email_sender.send.assert_not_called()


class TestResetPassword:
    @pytest.fixture
    def use_case(self, mock_uow, email_sender, settings):
        return ResetPasswordUseCase(mock_uow, email_sender, settings, clock=clock)

    @pytest.mark.asyncio
    async def test_resets_and_consumes_token(self, use_case, mock_uow, email_sender, make_user):
        user = make_user()
        record = reset_record(user.id)
        mock_uow.password_reset_tokens.get_by_token_hash.return_value = record
        mock_uow.users.get_by_id.return_value = user
        mock_uow.password_reset_tokens.mark_used.return_value = True

        result = await use_case.execute(TOKEN, "R3set!Pass", "R3set!Pass")

        assert result.is_ok()
        assert verify_password("R3set!Pass", user.password_hash)
        assert record.used is True
        mock_uow.password_reset_tokens.mark_used.assert_called_once_with(record.id)
        mock_uow.commit.assert_called_once()
        email_sender.send.assert_called_once()

    @pytest.mark.asyncio
    async def test_lost_race_rolls_back(self, use_case, mock_uow, email_sender, make_user):
        """Another request consumed the token between verification and update"""
        user = make_user()
        mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_record(user.id)
        mock_uow.users.get_by_id.return_value = user
        mock_uow.password_reset_tokens.mark_used.return_value = False

        result = await use_case.execute(TOKEN, "R3set!Pass", "R3set!Pass")

        assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
        email_sender.send.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "record_factory",
        [
            lambda user_id: None,
            lambda user_id: reset_record(user_id, used=True),
            lambda user_id: reset_record(user_id, expires_at=NOW),
        ],
        ids=["unknown", "used", "expired"],
    )
    async def test_rejects_unusable_token(self, use_case, mock_uow, record_factory):
        mock_uow.password_reset_tokens.get_by_token_hash.return_value = record_factory(uuid4())

        result = await use_case.execute(TOKEN, "R3set!Pass", "R3set!Pass")

        assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
        mock_uow.users.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_password_checks_come_before_token(self, use_case, mock_uow):
        mismatch = await use_case.execute(TOKEN, "R3set!Pass", "R3set!Pas")
        weak = await use_case.execute(TOKEN, "weakpass", "weakpass")

        assert mismatch.error.code == "PASSWORD_MISMATCH"
        assert weak.error.code == "WEAK_PASSWORD"
        mock_uow.password_reset_tokens.get_by_token_hash.assert_not_called()

    @pytest.mark.asyncio
    async def test_same_password(self, use_case, mock_uow, make_user):
        user = make_user(password="R3set!Pass")
        mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_record(user.id)
        mock_uow.users.get_by_id.return_value = user

        result = await use_case.execute(TOKEN, "R3set!Pass", "R3set!Pass")

        assert result.error.code == "SAME_PASSWORD"
        mock_uow.password_reset_tokens.mark_used.assert_not_called()


@pytest.mark.asyncio
async def test_verify_reset_token(mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = reset_record(uuid4())

    result = await VerifyResetTokenUseCase(mock_uow, clock=clock).execute(TOKEN)

    assert result.is_ok()
    assert result.value.valid is True
    mock_uow.password_reset_tokens.get_by_token_hash.assert_called_once_with(hash_reset_token(TOKEN))
