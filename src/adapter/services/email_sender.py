import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.app.services.email_sender import EmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(EmailSender):
    """SMTP delivery; the blocking smtplib session runs in a worker thread."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_address: str,
        use_tls: bool = True,
        timeout: int = 10,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_address = from_address
        self.use_tls = use_tls
        self.timeout = timeout

    def _deliver(self, to: str, subject: str, html_body: str) -> None:
        msg = MIMEMultipart()
        msg["From"] = self.from_address
        msg["To"] = to
        msg["Subject"] = subject
        msg.attach(MIMEText(html_body, "html", "utf-8"))

        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, to: str, subject: str, html_body: str) -> bool:
        try:
            await asyncio.to_thread(self._deliver, to, subject, html_body)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s (%s): %s", to, subject, e)
            return False
        logger.info("Email sent to %s: %s", to, subject)
        return True


class LoggingEmailSender(EmailSender):
    """Development sender that only logs what would have been sent."""

    async def send(self, to: str, subject: str, html_body: str) -> bool:
        logger.info("Email (not sent, SMTP disabled) to=%s subject=%r", to, subject)
        logger.debug("Email body for %s:\n%s", to, html_body)
        return True
