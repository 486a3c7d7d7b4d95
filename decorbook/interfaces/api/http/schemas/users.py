"""
===============================================================================
TARJETA CRC — schemas/users.py
===============================================================================

Module:
    Schemas HTTP de usuarios (upsert en login, rol, gestión)

Responsibilities:
    - DTOs de request/response para /user, /user/role, /userManage,
      /users/update-role y los listados de decoradores.
    - Conservar los nombres de wire de los documentos guardados (`_id`,
      `work_Status`, `last_loggedIn`, `updatedAt`).

Collaborators:
    - domain.entities.User
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .....domain.entities import User


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class UserLoginReq(BaseModel):
    """
    Body que envía el cliente después de cada sign-in.

    Los campos además de email solo importan en el primer login. Un `role`
    enviado por el cliente se acepta por compatibilidad y se ignora.
    """

    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    name: Optional[str] = None
    photo: Optional[str] = Field(default=None, description="Avatar URL")
    phone: Optional[str] = None
    division: Optional[str] = None
    district: Optional[str] = None


class UpdateRoleReq(BaseModel):
    email: Optional[str] = None
    role: Optional[str] = None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class UserRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    email: str
    name: Optional[str] = None
    photo: Optional[str] = None
    role: Optional[str] = None
    work_status: Optional[str] = Field(default=None, alias="work_Status")
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None
    last_logged_in: Optional[datetime] = Field(default=None, alias="last_loggedIn")
    working_date: Optional[Any] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_entity(cls, user: User) -> "UserRes":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            photo=user.photo,
            role=user.role,
            work_status=user.work_status,
            division=user.division,
            district=user.district,
            phone=user.phone,
            last_logged_in=user.last_logged_in,
            working_date=user.working_date,
            start_time=user.start_time,
            end_time=user.end_time,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UpsertUserRes(BaseModel):
    """Replica el resultado de escritura que el cliente ya entiende."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    created: bool
    inserted_id: Optional[str] = Field(default=None, alias="insertedId")
    matched_count: int = Field(default=0, alias="matchedCount")


class UserRoleRes(BaseModel):
    role: Optional[str] = None


class AvailableDecoratorsRes(BaseModel):
    available: bool
    decorators: list[UserRes] = Field(default_factory=list)
