from datetime import datetime
from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_raise
from src.app.repositories.contact_repository import IContactRepository
from src.domain.entities import Contact


class ContactRepository(IContactRepository):
    """Contact repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, contact: Contact) -> Contact:
        contact.email = contact.email.lower()
        self.session.add(contact)
        await flush_or_raise(self.session)
        await self.session.refresh(contact)
        return contact

    async def get_recent_by_email(self, email: str, since: datetime) -> Optional[Contact]:
        stmt = select(Contact).where(
            Contact.email == email.lower(), Contact.created_at >= since
        )
        result = await self.session.exec(stmt)
        return result.first()
