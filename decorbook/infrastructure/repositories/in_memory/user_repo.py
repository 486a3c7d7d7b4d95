"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user_repo.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Guardar usuarios en memoria (tests / desarrollo local).
  - Replicar la semántica del repositorio MongoDB (clave email, quitar
    work_Status).

Constraints:
  - Thread-safe: todo acceso ocurre bajo un Lock.
  - Copia al entrar y al salir; el caller nunca comparte entidades mutables.
============================================================
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import replace
from datetime import datetime
from threading import Lock
from typing import Dict, List, Optional

from bson import ObjectId

from ....domain.entities import ROLE_DECORATOR, WORK_STATUS_AVAILABLE, User


class InMemoryUserRepository:
    """In-memory UserRepository (id -> User)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[str, User] = {}

    def _find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user = self._find_by_email(email)
            return deepcopy(user) if user else None

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return deepcopy(user) if user else None

    def insert(self, user: User) -> str:
        user_id = str(ObjectId())
        with self._lock:
            self._users[user_id] = replace(deepcopy(user), id=user_id)
        return user_id

    def touch_last_login(self, email: str, at: datetime) -> bool:
        with self._lock:
            user = self._find_by_email(email)
            if user is None:
                return False
            user.last_logged_in = at
            return True

    def list_users(self) -> List[User]:
        with self._lock:
            return [deepcopy(u) for u in self._users.values()]

    def list_decorators(
        self, *, division: str | None = None, district: str | None = None
    ) -> List[User]:
        with self._lock:
            values = list(self._users.values())
        return [
            deepcopy(u)
            for u in values
            if u.is_decorator
            and (division is None or u.division == division)
            and (district is None or u.district == district)
        ]

    def set_role(
        self, email: str, role: str, *, work_status: str | None, at: datetime
    ) -> bool:
        with self._lock:
            user = self._find_by_email(email)
            if user is None:
                return False
            user.role = role
            user.work_status = work_status
            user.updated_at = at
            return True

    def set_work_status(self, user_id: str, work_status: str, at: datetime) -> bool:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return False
            user.work_status = work_status
            user.updated_at = at
            return True

    def promote_to_decorator(
        self,
        email: str,
        *,
        phone: str,
        division: str,
        district: str,
        at: datetime,
    ) -> bool:
        with self._lock:
            user = self._find_by_email(email)
            if user is None:
                return False
            user.role = ROLE_DECORATOR
            user.work_status = WORK_STATUS_AVAILABLE
            user.phone = phone
            user.division = division
            user.district = district
            user.updated_at = at
            return True
