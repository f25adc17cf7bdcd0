"""
Blog Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Blog


class CreateBlogCommand(BaseModel):
    title: str
    excerpt: str
    content: str
    category: str
    author: str
    image_url: Optional[str] = None
    read_time: Optional[str] = None
    featured: bool = False
    published: bool = True
    tags: List[str] = []
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class UpdateBlogCommand(BaseModel):
    title: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    author: Optional[str] = None
    image_url: Optional[str] = None
    read_time: Optional[str] = None
    featured: Optional[bool] = None
    published: Optional[bool] = None
    tags: Optional[List[str]] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class BlogSummary(BaseModel):
    id: str
    title: str
    slug: str
    excerpt: str
    category: str
    author: str
    image_url: str
    read_time: str
    featured: bool
    views: int
    likes: int
    tags: List[str]
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, blog: Blog) -> "BlogSummary":
        return cls(
            id=str(blog.id),
            title=blog.title,
            slug=blog.slug,
            excerpt=blog.excerpt,
            category=blog.category,
            author=blog.author,
            image_url=blog.image_url,
            read_time=blog.read_time,
            featured=blog.featured,
            views=blog.views,
            likes=blog.likes,
            tags=list(blog.tags or []),
            created_at=blog.created_at,
        )


class BlogDetail(BlogSummary):
    content: str
    published: bool
    author_id: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, blog: Blog) -> "BlogDetail":
        summary = BlogSummary.from_entity(blog)
        return cls(
            **summary.model_dump(),
            content=blog.content,
            published=blog.published,
            author_id=str(blog.author_id) if blog.author_id else None,
            meta_title=blog.meta_title,
            meta_description=blog.meta_description,
            updated_at=blog.updated_at,
        )


class BlogEnvelope(BaseModel):
    message: Optional[str] = None
    blog: BlogDetail


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_blogs: int
    has_next_page: bool
    has_prev_page: bool


class BlogListResponse(BaseModel):
    blogs: List[BlogSummary]
    pagination: Optional[Pagination] = None


class CategoryCount(BaseModel):
    name: str
    count: int


class CategoriesResponse(BaseModel):
    categories: List[CategoryCount]


class LikeResponse(BaseModel):
    message: str
    likes: int
