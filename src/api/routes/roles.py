from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.roles import (
    CreateRoleCommand,
    CreateRoleUseCase,
    DeleteRoleUseCase,
    GetRoleUseCase,
    ListRolesUseCase,
    RoleInfo,
    UpdateRoleCommand,
    UpdateRoleUseCase,
)
from src.depends import get_unit_of_work, require_roles

router = APIRouter(
    prefix="/roles", tags=["Roles"], dependencies=[Depends(require_roles("admin"))]
)


class RoleRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=255)
    permissions: List[str] = []


class RoleUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=255)
    permissions: Optional[List[str]] = None
    is_active: Optional[bool] = None


class RoleResponse(BaseModel):
    role: RoleInfo


class RoleListResponse(BaseModel):
    roles: List[RoleInfo]


class RoleMessageResponse(BaseModel):
    message: str


def _raise_for_error(error):
    if error.code == "ROLE_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in ("ROLE_ALREADY_EXISTS", "ROLE_IN_USE"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RoleResponse)
async def create_role(request: RoleRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 409 Conflict: Role name already taken
    """
    result = await CreateRoleUseCase(uow).execute(CreateRoleCommand(**request.model_dump()))
    if result.is_err():
        _raise_for_error(result.error)
    return RoleResponse(role=result.value)


@router.get("", status_code=status.HTTP_200_OK, response_model=RoleListResponse)
async def list_roles(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListRolesUseCase(uow).execute()
    if result.is_err():
        _raise_for_error(result.error)
    return RoleListResponse(roles=result.value)


@router.get("/{role_id}", status_code=status.HTTP_200_OK, response_model=RoleResponse)
async def get_role(role_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetRoleUseCase(uow).execute(role_id)
    if result.is_err():
        _raise_for_error(result.error)
    return RoleResponse(role=result.value)


@router.put("/{role_id}", status_code=status.HTTP_200_OK, response_model=RoleResponse)
async def update_role(
    role_id: UUID, request: RoleUpdateRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    command = UpdateRoleCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateRoleUseCase(uow).execute(role_id, command)
    if result.is_err():
        _raise_for_error(result.error)
    return RoleResponse(role=result.value)


@router.delete("/{role_id}", status_code=status.HTTP_200_OK, response_model=RoleMessageResponse)
async def delete_role(role_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 404 Not Found: Unknown role id
        - 409 Conflict: Users are still assigned to the role
    """
    result = await DeleteRoleUseCase(uow).execute(role_id)
    if result.is_err():
        _raise_for_error(result.error)
    return RoleMessageResponse(message=result.value)
