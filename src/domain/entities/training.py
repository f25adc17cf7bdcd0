"""
Training Entities

Courses offered by the institute and the dated sessions they run in.
"""

import re
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import DurationUnit, SessionStatus, TrainingCategory

DEFAULT_VENUE = "ISTC Training Center"
DEFAULT_CERTIFICATION = "Certificate of Completion"
DEFAULT_REGISTRATION_FEE = 1000.0
DEFAULT_SEATS = 20


def training_code_prefix(title: str) -> str:
    """
    Prefix of a course code.

    Initials of the first three words for multi-word titles, otherwise the
    first three letters. Falls back to TRN when no letters remain.
    """
    words = title.split()
    if len(words) >= 2:
        prefix = "".join(word[0] for word in words).upper()[:3]
    else:
        prefix = title.strip()[:3].upper()
    return re.sub(r"[^A-Z]", "", prefix) or "TRN"


class Training(SQLModel, table=True):
    """
    Training course entity.

    Business Rules:
    - title is unique ignoring case; slug and code are derived once at
      creation and never change
    - Deleting a course only deactivates it
    - Public listings show active courses only
    """

    __tablename__ = "trainings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    slug: str = Field(unique=True, index=True, max_length=255)
    code: str = Field(unique=True, index=True, max_length=20)
    description: Optional[str] = Field(default=None)
    target_group: str = Field(max_length=500)

    duration_value: int
    duration_unit: DurationUnit = Field(default=DurationUnit.days)
    duration_display: str = Field(max_length=100)

    cost_amount: float
    cost_currency: str = Field(default="KSH", max_length=10)
    cost_display: str = Field(max_length=100)
    cost_tax_inclusive: bool = Field(default=False)

    category: TrainingCategory = Field(default=TrainingCategory.safety, index=True)
    mode_of_study: List[str] = Field(default_factory=lambda: ["full-time"], sa_column=Column(JSON))
    prerequisites: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    learning_outcomes: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    requirements: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    certification: str = Field(default=DEFAULT_CERTIFICATION, max_length=200)
    registration_fee: float = Field(default=DEFAULT_REGISTRATION_FEE)

    is_featured: bool = Field(default=False)
    is_active: bool = Field(default=True)

    created_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    updated_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_training_active_featured", "is_active", "is_featured"),)


class TrainingSession(SQLModel, table=True):
    """One dated run of a course, with its own seat count."""

    __tablename__ = "training_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    training_id: UUID = Field(foreign_key="trainings.id", index=True)
    start_date: date = Field(index=True)
    end_date: date
    status: SessionStatus = Field(default=SessionStatus.scheduled)
    seats_total: int = Field(default=DEFAULT_SEATS)
    seats_booked: int = Field(default=0)
    venue: str = Field(default=DEFAULT_VENUE, max_length=200)
    instructor: Optional[str] = Field(default=None, max_length=100)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    @property
    def seats_available(self) -> int:
        return self.seats_total - self.seats_booked

    def overlaps(self, start_date: date, end_date: date) -> bool:
        return start_date <= self.end_date and end_date >= self.start_date
