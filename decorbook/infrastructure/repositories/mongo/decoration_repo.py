"""
Name: MongoDB Decoration Repository

Responsibilities:
  - CRUD de publicaciones de servicios en la colección "decorations"
  - Mapear documentos a entidades Decoration
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.database import Database

from ....domain.entities import DECORATION_MUTABLE_FIELDS, Decoration, utcnow
from ...db.client import DECORATIONS_COLLECTION
from .base import compact, id_of, to_object_id, translate_errors

_REPO = "MongoDecorationRepository"


def _doc_to_decoration(doc: Dict[str, Any]) -> Decoration:
    return Decoration(
        id=id_of(doc),
        name=doc.get("name", ""),
        category=doc.get("category", ""),
        description=doc.get("description", ""),
        price=float(doc.get("price") or 0),
        image=doc.get("image"),
        created_at=doc.get("created_at"),
        updated_at=doc.get("updated_at"),
    )


class MongoDecorationRepository:
    """R: DecorationRepository sobre la colección decorations."""

    def __init__(self, db: Database) -> None:
        self._decorations: Collection = db[DECORATIONS_COLLECTION]

    def insert(self, decoration: Decoration) -> str:
        doc = compact(
            {
                "name": decoration.name,
                "category": decoration.category,
                "description": decoration.description,
                "price": decoration.price,
                "image": decoration.image,
                "created_at": decoration.created_at,
                "updated_at": decoration.updated_at,
            }
        )
        with translate_errors(_REPO, "insert"):
            result = self._decorations.insert_one(doc)
        return str(result.inserted_id)

    def get(self, decoration_id: str) -> Optional[Decoration]:
        oid = to_object_id(decoration_id)
        if oid is None:
            return None
        with translate_errors(_REPO, "get"):
            doc = self._decorations.find_one({"_id": oid})
        return _doc_to_decoration(doc) if doc else None

    def list_decorations(self) -> List[Decoration]:
        with translate_errors(_REPO, "list_decorations"):
            docs = list(self._decorations.find())
        return [_doc_to_decoration(d) for d in docs]

    def update(self, decoration_id: str, changes: Dict[str, Any]) -> bool:
        oid = to_object_id(decoration_id)
        if oid is None:
            return False
        fields = {k: v for k, v in changes.items() if k in DECORATION_MUTABLE_FIELDS}
        fields["updated_at"] = utcnow()
        with translate_errors(_REPO, "update"):
            result = self._decorations.update_one({"_id": oid}, {"$set": fields})
        return result.matched_count > 0

    def delete(self, decoration_id: str) -> bool:
        oid = to_object_id(decoration_id)
        if oid is None:
            return False
        with translate_errors(_REPO, "delete"):
            result = self._decorations.delete_one({"_id": oid})
        return result.deleted_count > 0
