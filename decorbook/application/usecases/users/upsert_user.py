"""
===============================================================================
USE CASE: Upsert User on Login
===============================================================================

Business Rules:
R1) email es obligatorio.
R2) Usuario existente (por email): solo se actualiza last_loggedIn; los
    campos de perfil que manda el cliente se ignoran.
R3) Usuario nuevo: se inserta con role=guest y last_loggedIn=now. El rol
    nunca se toma del cliente; solo cambia por acción de un admin o por una
    solicitud de promoción aprobada.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ....domain.entities import ROLE_GUEST, User, utcnow
from ....domain.repositories import UserRepository
from .user_results import UpsertUserResult, UserError, UserErrorCode


@dataclass
class UserLoginInput:
    email: str | None
    name: str | None = None
    photo: str | None = None
    phone: str | None = None
    division: str | None = None
    district: str | None = None


class UpsertUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, data: UserLoginInput) -> UpsertUserResult:
        email = (data.email or "").strip()
        if not email:
            return UpsertUserResult(
                error=UserError(
                    code=UserErrorCode.VALIDATION_ERROR, message="email is required"
                )
            )

        now = utcnow()
        existing = self._users.get_by_email(email)
        if existing is not None:
            self._users.touch_last_login(email, now)
            return UpsertUserResult(created=False, user_id=existing.id)

        user = User(
            email=email,
            name=data.name,
            photo=data.photo,
            phone=data.phone,
            division=data.division,
            district=data.district,
            role=ROLE_GUEST,
            last_logged_in=now,
            created_at=now,
        )
        return UpsertUserResult(created=True, user_id=self._users.insert(user))
