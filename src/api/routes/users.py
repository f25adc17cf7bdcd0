from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import Settings
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserEnvelope,
    UserListResponse,
)
from src.depends import get_settings, get_unit_of_work, require_roles

router = APIRouter(
    prefix="/users", tags=["Users"], dependencies=[Depends(require_roles("admin"))]
)


class CreateUserRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)
    role_id: UUID


class UpdateUserRequest(BaseModel):
    """Password changes go through the auth endpoints, never here"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    username: Optional[str] = Field(None, min_length=3, max_length=30)
    email: Optional[EmailStr] = None
    role_id: Optional[UUID] = None
    is_active: Optional[bool] = None


class UserMessageResponse(BaseModel):
    message: str


def _raise_for_error(error):
    if error.code == "USER_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in ("WEAK_PASSWORD", "INVALID_ROLE"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("USER_ALREADY_EXISTS", "USER_IN_USE"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserEnvelope)
async def create_user(
    request: CreateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: Settings = Depends(get_settings),
):
    """
    Raises:
        - 400 Bad Request: Weak password or unknown role
        - 409 Conflict: Email or username already registered
    """
    result = await CreateUserUseCase(uow, settings).execute(
        CreateUserCommand(**request.model_dump())
    )
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserEnvelope)
async def get_user(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetUserUseCase(uow).execute(user_id)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.put("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserEnvelope)
async def update_user(
    user_id: UUID, request: UpdateUserRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    command = UpdateUserCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateUserUseCase(uow).execute(user_id, command)
    if result.is_err():
        _raise_for_error(result.error)
    return result.value


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserMessageResponse)
async def delete_user(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await DeleteUserUseCase(uow).execute(user_id)
    if result.is_err():
        _raise_for_error(result.error)
    return UserMessageResponse(message=result.value)
