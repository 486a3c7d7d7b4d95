"""
Name: In-memory Decoration Repository

Responsibilities:
  - Guardar publicaciones en memoria (tests / desarrollo local), thread-safe.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import replace
from threading import Lock
from typing import Any, Dict, List, Optional

from bson import ObjectId

from ....domain.entities import DECORATION_MUTABLE_FIELDS, Decoration, utcnow


class InMemoryDecorationRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._decorations: Dict[str, Decoration] = {}

    def insert(self, decoration: Decoration) -> str:
        decoration_id = str(ObjectId())
        with self._lock:
            self._decorations[decoration_id] = replace(
                deepcopy(decoration), id=decoration_id
            )
        return decoration_id

    def get(self, decoration_id: str) -> Optional[Decoration]:
        with self._lock:
            decoration = self._decorations.get(decoration_id)
            return deepcopy(decoration) if decoration else None

    def list_decorations(self) -> List[Decoration]:
        with self._lock:
            return [deepcopy(d) for d in self._decorations.values()]

    def update(self, decoration_id: str, changes: Dict[str, Any]) -> bool:
        fields = {k: v for k, v in changes.items() if k in DECORATION_MUTABLE_FIELDS}
        with self._lock:
            current = self._decorations.get(decoration_id)
            if current is None:
                return False
            self._decorations[decoration_id] = replace(
                current, updated_at=utcnow(), **fields
            )
            return True

    def delete(self, decoration_id: str) -> bool:
        with self._lock:
            return self._decorations.pop(decoration_id, None) is not None
