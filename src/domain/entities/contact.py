"""
Contact Entity

Messages submitted through the public contact form.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ContactCategory, ContactPriority, ContactStatus


class Contact(SQLModel, table=True):
    __tablename__ = "contacts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(index=True, max_length=255)
    subject: str = Field(max_length=200)
    message: str = Field(max_length=2000)
    phone: Optional[str] = Field(default=None, max_length=50)

    status: ContactStatus = Field(default=ContactStatus.pending)
    category: ContactCategory = Field(default=ContactCategory.general)
    priority: ContactPriority = Field(default=ContactPriority.medium)

    user_id: Optional[UUID] = Field(default=None, foreign_key="users.id")
    is_archived: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_contact_email_created", "email", "created_at"),)
