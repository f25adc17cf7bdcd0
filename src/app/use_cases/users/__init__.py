"""
User Management Use Cases

Admin-only account administration.
"""

from .create_user_use_case import CreateUserUseCase
from .list_users_use_case import ListUsersUseCase
from .get_user_use_case import GetUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import CreateUserCommand, UpdateUserCommand, UserEnvelope, UserListResponse

__all__ = [
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "CreateUserCommand",
    "UpdateUserCommand",
    "UserEnvelope",
    "UserListResponse",
]
