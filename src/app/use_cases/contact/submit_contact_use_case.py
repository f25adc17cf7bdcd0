"""
Submit Contact Use Case

Stores a contact-form message and notifies the sender and the admin.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from pydantic import BaseModel

from config import Settings
from libs.result import Error, Result, Return
from src.app.services import email_templates
from src.app.services.email_sender import EmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Contact, ContactCategory

logger = logging.getLogger(__name__)


class SubmitContactCommand(BaseModel):
    name: str
    email: str
    subject: str
    message: str
    phone: Optional[str] = None
    category: ContactCategory = ContactCategory.general
    user_id: Optional[UUID] = None


class ContactResponse(BaseModel):
    message: str
    contact_id: str


class SubmitContactUseCase:
    """
    Business Rules:
    - One submission per email per CONTACT_RATE_LIMIT_MINUTES (RATE_LIMITED)
    - Submission is linked to the user when the sender is authenticated
    - Confirmation goes to the sender, notification to ADMIN_EMAIL
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: EmailSender,
        settings: Settings,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.settings = settings
        self.clock = clock

    async def execute(self, command: SubmitContactCommand) -> Result[ContactResponse]:
        now = self.clock()
        window = timedelta(minutes=self.settings.CONTACT_RATE_LIMIT_MINUTES)

        async with self.uow:
            recent = await self.uow.contacts.get_recent_by_email(command.email, since=now - window)
            if recent is not None:
                return Return.err(
                    Error("RATE_LIMITED", "Please wait before submitting another message")
                )

            contact = await self.uow.contacts.create(
                Contact(
                    name=command.name,
                    email=command.email,
                    subject=command.subject,
                    message=command.message,
                    phone=command.phone,
                    category=command.category,
                    user_id=command.user_id,
                    created_at=now,
                )
            )
            await self.uow.commit()

        logger.info("Contact submission %s received from %s", contact.id, contact.email)

        subject, html = email_templates.contact_confirmation(
            self.settings.APP_NAME, command.name, command.message
        )
        await self.email_sender.send(command.email, subject, html)

        subject, html = email_templates.contact_notification(
            command.name,
            command.email,
            command.subject,
            command.message,
            command.phone,
            contact.created_at,
        )
        await self.email_sender.send(self.settings.ADMIN_EMAIL, subject, html)

        return Return.ok(
            ContactResponse(
                message="Thank you for contacting us. We will get back to you soon.",
                contact_id=str(contact.id),
            )
        )
