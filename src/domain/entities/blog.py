"""
Blog Entity

Articles published on the institute website.
"""

import re
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

DEFAULT_BLOG_IMAGE_URL = "https://via.placeholder.com/800x400"


def slugify(title: str) -> str:
    """Lower-case the title, drop non-word characters, join words with '-'."""
    slug = re.sub(r"[^\w\s-]", "", title.lower())
    slug = re.sub(r"\s+", "-", slug.strip())
    return re.sub(r"-+", "-", slug)


class Blog(SQLModel, table=True):
    """
    Blog entity.

    Business Rules:
    - slug is derived from the title and is unique
    - views and likes only change through atomic increments
    - Only published posts are listed publicly
    """

    __tablename__ = "blogs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    slug: str = Field(unique=True, index=True, max_length=255)
    excerpt: str = Field(max_length=300)
    content: str
    category: str = Field(index=True, max_length=100)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    author: str = Field(max_length=100)
    author_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    image_url: str = Field(default=DEFAULT_BLOG_IMAGE_URL, max_length=1024)
    read_time: str = Field(default="5 min read", max_length=50)
    featured: bool = Field(default=False)
    published: bool = Field(default=True)
    views: int = Field(default=0)
    likes: int = Field(default=0)

    meta_title: Optional[str] = Field(default=None, max_length=200)
    meta_description: Optional[str] = Field(default=None, max_length=160)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_blog_published_created", "published", "created_at"),
        Index("idx_blog_featured", "featured"),
    )
