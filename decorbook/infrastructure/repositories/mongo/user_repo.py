"""
Name: MongoDB User Repository

Responsibilities:
  - Persistir usuarios en la colección "users", con el email como clave
  - Mapear documentos (nombres legacy: work_Status, last_loggedIn, updatedAt)
    a entidades User
  - Cambios de rol, incluyendo quitar work_Status a quien no es decorador
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.database import Database

from ....domain.entities import ROLE_DECORATOR, WORK_STATUS_AVAILABLE, User
from ...db.client import USERS_COLLECTION
from .base import compact, id_of, to_object_id, translate_errors

_REPO = "MongoUserRepository"


def _doc_to_user(doc: Dict[str, Any]) -> User:
    return User(
        id=id_of(doc),
        email=doc.get("email", ""),
        name=doc.get("name"),
        photo=doc.get("photo") or doc.get("image"),
        role=doc.get("role"),
        work_status=doc.get("work_Status"),
        division=doc.get("division"),
        district=doc.get("district"),
        phone=doc.get("phone"),
        last_logged_in=doc.get("last_loggedIn"),
        working_date=doc.get("working_date"),
        start_time=doc.get("start_time"),
        end_time=doc.get("end_time"),
        created_at=doc.get("created_at"),
        updated_at=doc.get("updatedAt"),
    )


def _user_to_doc(user: User) -> Dict[str, Any]:
    return compact(
        {
            "email": user.email,
            "name": user.name,
            "photo": user.photo,
            "role": user.role,
            "work_Status": user.work_status,
            "division": user.division,
            "district": user.district,
            "phone": user.phone,
            "last_loggedIn": user.last_logged_in,
            "working_date": user.working_date,
            "start_time": user.start_time,
            "end_time": user.end_time,
            "created_at": user.created_at,
            "updatedAt": user.updated_at,
        }
    )


class MongoUserRepository:
    """R: UserRepository sobre la colección users."""

    def __init__(self, db: Database) -> None:
        self._users: Collection = db[USERS_COLLECTION]

    def get_by_email(self, email: str) -> Optional[User]:
        with translate_errors(_REPO, "get_by_email"):
            doc = self._users.find_one({"email": email})
        return _doc_to_user(doc) if doc else None

    def get_by_id(self, user_id: str) -> Optional[User]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        with translate_errors(_REPO, "get_by_id"):
            doc = self._users.find_one({"_id": oid})
        return _doc_to_user(doc) if doc else None

    def insert(self, user: User) -> str:
        with translate_errors(_REPO, "insert"):
            result = self._users.insert_one(_user_to_doc(user))
        return str(result.inserted_id)

    def touch_last_login(self, email: str, at: datetime) -> bool:
        with translate_errors(_REPO, "touch_last_login"):
            result = self._users.update_one(
                {"email": email}, {"$set": {"last_loggedIn": at}}
            )
        return result.matched_count > 0

    def list_users(self) -> List[User]:
        with translate_errors(_REPO, "list_users"):
            docs = list(self._users.find())
        return [_doc_to_user(d) for d in docs]

    def list_decorators(
        self, *, division: str | None = None, district: str | None = None
    ) -> List[User]:
        query: Dict[str, Any] = {"role": ROLE_DECORATOR}
        if division is not None:
            query["division"] = division
        if district is not None:
            query["district"] = district
        with translate_errors(_REPO, "list_decorators"):
            docs = list(self._users.find(query))
        return [_doc_to_user(d) for d in docs]

    def set_role(
        self, email: str, role: str, *, work_status: str | None, at: datetime
    ) -> bool:
        update: Dict[str, Any] = {"$set": {"role": role, "updatedAt": at}}
        if work_status is None:
            update["$unset"] = {"work_Status": ""}
        else:
            update["$set"]["work_Status"] = work_status
        with translate_errors(_REPO, "set_role"):
            result = self._users.update_one({"email": email}, update)
        return result.matched_count > 0

    def set_work_status(self, user_id: str, work_status: str, at: datetime) -> bool:
        oid = to_object_id(user_id)
        if oid is None:
            return False
        with translate_errors(_REPO, "set_work_status"):
            result = self._users.update_one(
                {"_id": oid},
                {"$set": {"work_Status": work_status, "updatedAt": at}},
            )
        return result.matched_count > 0

    def promote_to_decorator(
        self,
        email: str,
        *,
        phone: str,
        division: str,
        district: str,
        at: datetime,
    ) -> bool:
        with translate_errors(_REPO, "promote_to_decorator"):
            result = self._users.update_one(
                {"email": email},
                {
                    "$set": {
                        "role": ROLE_DECORATOR,
                        "work_Status": WORK_STATUS_AVAILABLE,
                        "phone": phone,
                        "division": division,
                        "district": district,
                        "updatedAt": at,
                    }
                },
            )
        return result.matched_count > 0
