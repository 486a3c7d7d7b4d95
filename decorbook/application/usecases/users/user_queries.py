"""
USE CASES: User queries

- GetUserRoleUseCase: rol del caller verificado (None si el usuario no tiene
  documento o todavía no tiene rol).
- ListUsersUseCase: todos los usuarios (pantalla de gestión del admin).
- ListDecoratorsUseCase: todos los usuarios con role=decorator.
"""

from __future__ import annotations

from typing import Optional

from ....domain.repositories import UserRepository
from .user_results import UserListResult


class GetUserRoleUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, email: str) -> Optional[str]:
        user = self._users.get_by_email(email)
        return user.role if user else None


class ListUsersUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self) -> UserListResult:
        return UserListResult(users=self._users.list_users())


class ListDecoratorsUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self) -> UserListResult:
        return UserListResult(users=self._users.list_decorators())
