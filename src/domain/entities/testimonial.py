"""
Testimonial Entity

Student feedback shown on the website, optionally tied to a course.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

DEFAULT_AVATAR_COLOR = "#3b82f6"


def initials(name: str) -> str:
    letters = "".join(part[0] for part in name.split()).upper()[:2]
    return letters or "NA"


def company_from_role(role: str) -> Optional[str]:
    """'Safety Officer, Acme Ltd' -> 'Acme Ltd'"""
    if "," not in role:
        return None
    return role.split(",")[1].strip() or None


class Testimonial(SQLModel, table=True):
    """
    Testimonial entity.

    Business Rules:
    - Only active, approved testimonials are shown publicly
    - image holds the author's initials unless one is supplied
    - rating is between 1 and 5
    """

    __tablename__ = "testimonials"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    role: str = Field(max_length=200)
    company: Optional[str] = Field(default=None, max_length=200)
    content: str = Field(max_length=1000)
    rating: int = Field(default=5)
    image: Optional[str] = Field(default=None, max_length=50)
    avatar_color: str = Field(default=DEFAULT_AVATAR_COLOR, max_length=7)

    featured: bool = Field(default=False)
    approved: bool = Field(default=True)
    is_active: bool = Field(default=True)
    display_order: int = Field(default=0)

    training_id: Optional[UUID] = Field(default=None, foreign_key="trainings.id", index=True)
    training_name: Optional[str] = Field(default=None, max_length=200)

    created_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    updated_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_testimonial_visible", "is_active", "approved", "featured"),
        Index("idx_testimonial_rating", "rating"),
    )
