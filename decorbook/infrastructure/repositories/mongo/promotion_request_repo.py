"""
Name: MongoDB Promotion Request Repository

Responsibilities:
  - Persistir solicitudes de promoción a decorador en "decoratorRequests"
  - Buscar la solicitud activa (pending/approved) de un email
  - Las transiciones terminales sellan approvedAt / rejectedAt
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.database import Database

from ....domain.entities import (
    ACTIVE_REQUEST_STATUSES,
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_REJECTED,
    PromotionRequest,
)
from ...db.client import PROMOTION_REQUESTS_COLLECTION
from .base import compact, id_of, to_object_id, translate_errors

_REPO = "MongoPromotionRequestRepository"


def _doc_to_request(doc: Dict[str, Any]) -> PromotionRequest:
    return PromotionRequest(
        id=id_of(doc),
        name=doc.get("name", ""),
        email=doc.get("email", ""),
        division=doc.get("division", ""),
        district=doc.get("district", ""),
        phone=doc.get("phone", ""),
        role=doc.get("role", ""),
        status=doc.get("status", ""),
        requested_at=doc.get("requestedAt"),
        approved_at=doc.get("approvedAt"),
        rejected_at=doc.get("rejectedAt"),
    )


class MongoPromotionRequestRepository:
    """R: PromotionRequestRepository sobre decoratorRequests."""

    def __init__(self, db: Database) -> None:
        self._requests: Collection = db[PROMOTION_REQUESTS_COLLECTION]

    def insert(self, request: PromotionRequest) -> str:
        doc = compact(
            {
                "name": request.name,
                "email": request.email,
                "division": request.division,
                "district": request.district,
                "phone": request.phone,
                "role": request.role,
                "status": request.status,
                "requestedAt": request.requested_at,
            }
        )
        with translate_errors(_REPO, "insert"):
            result = self._requests.insert_one(doc)
        return str(result.inserted_id)

    def get(self, request_id: str) -> Optional[PromotionRequest]:
        oid = to_object_id(request_id)
        if oid is None:
            return None
        with translate_errors(_REPO, "get"):
            doc = self._requests.find_one({"_id": oid})
        return _doc_to_request(doc) if doc else None

    def find_active_by_email(self, email: str) -> Optional[PromotionRequest]:
        with translate_errors(_REPO, "find_active_by_email"):
            doc = self._requests.find_one(
                {"email": email, "status": {"$in": sorted(ACTIVE_REQUEST_STATUSES)}}
            )
        return _doc_to_request(doc) if doc else None

    def list_requests(self, *, status: str | None = None) -> List[PromotionRequest]:
        query = {"status": status} if status else {}
        with translate_errors(_REPO, "list_requests"):
            docs = list(self._requests.find(query))
        return [_doc_to_request(d) for d in docs]

    def mark_approved(self, request_id: str, at: datetime) -> bool:
        return self._mark(request_id, REQUEST_STATUS_APPROVED, "approvedAt", at)

    def mark_rejected(self, request_id: str, at: datetime) -> bool:
        return self._mark(request_id, REQUEST_STATUS_REJECTED, "rejectedAt", at)

    def _mark(
        self, request_id: str, status: str, stamp_field: str, at: datetime
    ) -> bool:
        oid = to_object_id(request_id)
        if oid is None:
            return False
        with translate_errors(_REPO, f"mark_{status}"):
            result = self._requests.update_one(
                {"_id": oid}, {"$set": {"status": status, stamp_field: at}}
            )
        return result.matched_count > 0
