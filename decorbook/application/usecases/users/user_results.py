"""
USER USE CASE RESULTS

Resultados tipados para upsert en login, consulta y cambio de rol y listados.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import User


class UserErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class UserError:
    code: UserErrorCode
    message: str
    resource: str | None = None


@dataclass
class UpsertUserResult:
    """created es False si el usuario ya existía y solo se movió last_loggedIn."""

    created: bool = False
    user_id: str | None = None
    error: UserError | None = None


@dataclass
class UserResult:
    user: User | None = None
    error: UserError | None = None


@dataclass
class UserListResult:
    users: List[User] = field(default_factory=list)
    error: UserError | None = None
