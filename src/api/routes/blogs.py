from typing import List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.repositories.blog_repository import BlogFilter
from src.app.services.token_service import TokenClaims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.blogs import (
    BlogEnvelope,
    BlogListResponse,
    CategoriesResponse,
    CreateBlogCommand,
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogBySlugUseCase,
    GetBlogUseCase,
    LikeBlogUseCase,
    LikeResponse,
    ListBlogCategoriesUseCase,
    ListBlogsUseCase,
    ListFeaturedBlogsUseCase,
    UpdateBlogCommand,
    UpdateBlogUseCase,
)
from src.depends import get_unit_of_work, require_roles

router = APIRouter(prefix="/blogs", tags=["Blogs"])

BlogSort = Literal["-created_at", "created_at", "-views", "-likes", "title"]


class BlogRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    excerpt: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=50)
    author: str = Field(..., min_length=1, max_length=100)
    image_url: Optional[str] = None
    read_time: Optional[str] = Field(None, max_length=20)
    featured: bool = False
    published: bool = True
    tags: List[str] = []
    meta_title: Optional[str] = Field(None, max_length=200)
    meta_description: Optional[str] = Field(None, max_length=160)


class BlogUpdateRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    excerpt: Optional[str] = Field(None, min_length=1, max_length=300)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    author: Optional[str] = Field(None, min_length=1, max_length=100)
    image_url: Optional[str] = None
    read_time: Optional[str] = Field(None, max_length=20)
    featured: Optional[bool] = None
    published: Optional[bool] = None
    tags: Optional[List[str]] = None
    meta_title: Optional[str] = Field(None, max_length=200)
    meta_description: Optional[str] = Field(None, max_length=160)


class BlogMessageResponse(BaseModel):
    message: str


def _raise_for_error(error):
    if error.code == "BLOG_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "BLOG_ALREADY_EXISTS":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "INVALID_TITLE":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=BlogListResponse)
async def list_blogs(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    search: Optional[str] = None,
    sort: BlogSort = "-created_at",
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Published posts only, newest first unless `sort` says otherwise."""
    blog_filter = BlogFilter(category=category, featured=featured, search=search)
    result = await ListBlogsUseCase(uow).execute(blog_filter, page=page, limit=limit, sort=sort)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


# Static paths are registered before /{blog_id} so they are matched first


@router.get("/featured", status_code=status.HTTP_200_OK, response_model=BlogListResponse)
async def list_featured_blogs(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListFeaturedBlogsUseCase(uow).execute()
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/categories", status_code=status.HTTP_200_OK, response_model=CategoriesResponse)
async def list_blog_categories(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListBlogCategoriesUseCase(uow).execute()
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/slug/{slug}", status_code=status.HTTP_200_OK, response_model=BlogEnvelope)
async def get_blog_by_slug(slug: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Each read through the slug counts one view."""
    result = await GetBlogBySlugUseCase(uow).execute(slug)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/{blog_id}", status_code=status.HTTP_200_OK, response_model=BlogEnvelope)
async def get_blog(blog_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetBlogUseCase(uow).execute(blog_id)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.post("/{blog_id}/like", status_code=status.HTTP_200_OK, response_model=LikeResponse)
async def like_blog(blog_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await LikeBlogUseCase(uow).execute(blog_id)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BlogEnvelope)
async def create_blog(
    request: BlogRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: Caller is neither admin nor editor
        - 409 Conflict: A post with the same slug exists
    """
    result = await CreateBlogUseCase(uow).execute(
        CreateBlogCommand(**request.model_dump()), author_id=UUID(current_user.user_id)
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.put("/{blog_id}", status_code=status.HTTP_200_OK, response_model=BlogEnvelope)
async def update_blog(
    blog_id: UUID,
    request: BlogUpdateRequest,
    current_user: TokenClaims = Depends(require_roles("admin", "editor")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateBlogCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateBlogUseCase(uow).execute(blog_id, command)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.delete("/{blog_id}", status_code=status.HTTP_200_OK, response_model=BlogMessageResponse)
async def delete_blog(
    blog_id: UUID,
    current_user: TokenClaims = Depends(require_roles("admin")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteBlogUseCase(uow).execute(blog_id)
    if result.is_err():
        _raise_for_error(result.error)
    return BlogMessageResponse(message=result.value)
