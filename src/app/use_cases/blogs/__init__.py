"""
Blog Use Cases
"""

from .create_blog_use_case import CreateBlogUseCase
from .list_blogs_use_case import ListBlogsUseCase
from .list_featured_blogs_use_case import ListFeaturedBlogsUseCase
from .list_blog_categories_use_case import ListBlogCategoriesUseCase
from .get_blog_use_case import GetBlogUseCase, GetBlogBySlugUseCase
from .update_blog_use_case import UpdateBlogUseCase
from .delete_blog_use_case import DeleteBlogUseCase
from .like_blog_use_case import LikeBlogUseCase
from .dtos import (
    CreateBlogCommand,
    UpdateBlogCommand,
    BlogEnvelope,
    BlogListResponse,
    CategoriesResponse,
    LikeResponse,
)

__all__ = [
    "CreateBlogUseCase",
    "ListBlogsUseCase",
    "ListFeaturedBlogsUseCase",
    "ListBlogCategoriesUseCase",
    "GetBlogUseCase",
    "GetBlogBySlugUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "LikeBlogUseCase",
    "CreateBlogCommand",
    "UpdateBlogCommand",
    "BlogEnvelope",
    "BlogListResponse",
    "CategoriesResponse",
    "LikeResponse",
]
