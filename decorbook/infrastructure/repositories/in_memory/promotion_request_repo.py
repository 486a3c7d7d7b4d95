"""
Name: In-memory Promotion Request Repository

Responsibilities:
  - Guardar solicitudes de promoción en memoria (tests / desarrollo local),
    thread-safe.
  - Respetar el orden de inserción en los listados, como un scan de MongoDB.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import replace
from datetime import datetime
from threading import Lock
from typing import Dict, List, Optional

from bson import ObjectId

from ....domain.entities import (
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_REJECTED,
    PromotionRequest,
)


class InMemoryPromotionRequestRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._requests: Dict[str, PromotionRequest] = {}

    def insert(self, request: PromotionRequest) -> str:
        request_id = str(ObjectId())
        with self._lock:
            self._requests[request_id] = replace(deepcopy(request), id=request_id)
        return request_id

    def get(self, request_id: str) -> Optional[PromotionRequest]:
        with self._lock:
            request = self._requests.get(request_id)
            return deepcopy(request) if request else None

    def find_active_by_email(self, email: str) -> Optional[PromotionRequest]:
        with self._lock:
            for request in self._requests.values():
                if request.email == email and request.is_active:
                    return deepcopy(request)
        return None

    def list_requests(self, *, status: str | None = None) -> List[PromotionRequest]:
        with self._lock:
            return [
                deepcopy(r)
                for r in self._requests.values()
                if not status or r.status == status
            ]

    def mark_approved(self, request_id: str, at: datetime) -> bool:
        with self._lock:
            request = self._requests.get(request_id)
            if request is None:
                return False
            request.status = REQUEST_STATUS_APPROVED
            request.approved_at = at
            return True

    def mark_rejected(self, request_id: str, at: datetime) -> bool:
        with self._lock:
            request = self._requests.get(request_id)
            if request is None:
                return False
            request.status = REQUEST_STATUS_REJECTED
            request.rejected_at = at
            return True
