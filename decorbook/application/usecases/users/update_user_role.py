"""
===============================================================================
USE CASE: Update User Role (admin)
===============================================================================

Rules:
    - role tiene que ser guest / decorator / admin.
    - decorator -> work_Status queda en "available".
    - cualquier otro rol -> se elimina work_Status del documento.
    - Email desconocido -> NOT_FOUND.
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import (
    KNOWN_ROLES,
    ROLE_DECORATOR,
    WORK_STATUS_AVAILABLE,
    utcnow,
)
from ....domain.repositories import UserRepository
from .user_results import UserError, UserErrorCode, UserResult


class UpdateUserRoleUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, email: str | None, role: str | None) -> UserResult:
        if not email or not role:
            return self._validation("email and role are required")
        if role not in KNOWN_ROLES:
            return self._validation(
                f"role must be one of: {', '.join(sorted(KNOWN_ROLES))}"
            )

        work_status = WORK_STATUS_AVAILABLE if role == ROLE_DECORATOR else None
        if not self._users.set_role(email, role, work_status=work_status, at=utcnow()):
            return UserResult(
                error=UserError(
                    code=UserErrorCode.NOT_FOUND,
                    message="User not found",
                    resource=email,
                )
            )
        return UserResult(user=self._users.get_by_email(email))

    @staticmethod
    def _validation(message: str) -> UserResult:
        return UserResult(
            error=UserError(code=UserErrorCode.VALIDATION_ERROR, message=message)
        )
