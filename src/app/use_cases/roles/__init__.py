"""
Role Management Use Cases
"""

from .create_role_use_case import CreateRoleUseCase
from .list_roles_use_case import ListRolesUseCase
from .get_role_use_case import GetRoleUseCase
from .update_role_use_case import UpdateRoleUseCase
from .delete_role_use_case import DeleteRoleUseCase
from .seed_roles_use_case import SeedRolesUseCase, DEFAULT_ROLES
from .dtos import CreateRoleCommand, UpdateRoleCommand, RoleInfo

__all__ = [
    "CreateRoleUseCase",
    "ListRolesUseCase",
    "GetRoleUseCase",
    "UpdateRoleUseCase",
    "DeleteRoleUseCase",
    "SeedRolesUseCase",
    "DEFAULT_ROLES",
    "CreateRoleCommand",
    "UpdateRoleCommand",
    "RoleInfo",
]
