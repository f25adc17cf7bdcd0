import smtplib
from unittest.mock import MagicMock, patch

import pytest

from src.adapter.services.email_sender import LoggingEmailSender, SmtpEmailSender
from src.app.services import email_templates


@pytest.fixture
def sender():
    return SmtpEmailSender(
        host="smtp.example.com",
        port=587,
        username="mailer",
        password="secret",
        from_address="noreply@example.com",
        timeout=5,
    )


@pytest.mark.asyncio
async def test_smtp_sender_delivers(sender):
    with patch("src.adapter.services.email_sender.smtplib.SMTP") as smtp_cls:
        server = smtp_cls.return_value.__enter__.return_value

        sent = await sender.send("alice@example.com", "Hello", "<p>Hi</p>")

    assert sent is True
    smtp_cls.assert_called_once_with("smtp.example.com", 587, timeout=5)
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("mailer", "secret")
    message = server.send_message.call_args.args[0]
    assert message["To"] == "alice@example.com"
    assert message["From"] == "noreply@example.com"


@pytest.mark.asyncio
async def test_smtp_failure_returns_false(sender):
    with patch("src.adapter.services.email_sender.smtplib.SMTP") as smtp_cls:
        smtp_cls.side_effect = smtplib.SMTPConnectError(421, "unavailable")

        sent = await sender.send("alice@example.com", "Hello", "<p>Hi</p>")

    assert sent is False


@pytest.mark.asyncio
async def test_smtp_timeout_returns_false(sender):
    with patch("src.adapter.services.email_sender.smtplib.SMTP", MagicMock(side_effect=TimeoutError())):
        sent = await sender.send("alice@example.com", "Hello", "<p>Hi</p>")

    assert sent is False


@pytest.mark.asyncio
async def test_logging_sender():
    assert await LoggingEmailSender().send("alice@example.com", "Hello", "<p>Hi</p>") is True


def test_templates_escape_user_input():
    subject, html = email_templates.contact_confirmation("Institute", "<b>Eve</b>", "a < b")

    assert subject == "Thank You for Contacting Institute"
    assert "<b>Eve</b>" not in html
    assert "&lt;b&gt;Eve&lt;/b&gt;" in html
    assert "a &lt; b" in html
