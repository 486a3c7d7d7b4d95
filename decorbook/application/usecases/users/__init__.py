"""
Casos de uso de usuarios: upsert en login, consulta/cambio de rol, listados.
"""

from .update_user_role import UpdateUserRoleUseCase
from .upsert_user import UpsertUserUseCase, UserLoginInput
from .user_queries import GetUserRoleUseCase, ListDecoratorsUseCase, ListUsersUseCase
from .user_results import (
    UpsertUserResult,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
)

__all__ = [
    "UserError",
    "UserErrorCode",
    "UserResult",
    "UserListResult",
    "UpsertUserResult",
    "UserLoginInput",
    "UpsertUserUseCase",
    "GetUserRoleUseCase",
    "UpdateUserRoleUseCase",
    "ListUsersUseCase",
    "ListDecoratorsUseCase",
]
