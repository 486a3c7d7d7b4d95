"""
Name: MongoDB repository helpers

Responsibilities:
  - Convertir ids string a ObjectId (id no parseable -> None, "no encontrado")
  - Traducir fallas del driver a DatabaseError con el nombre de la operación
  - Quitar los valores None antes de escribir documentos
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger


def to_object_id(value: str | None) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def id_of(doc: Dict[str, Any]) -> Optional[str]:
    raw = doc.get("_id")
    return str(raw) if raw is not None else None


def compact(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Copia sin valores None (los campos ausentes siguen ausentes)."""
    return {k: v for k, v in doc.items() if v is not None}


@contextmanager
def translate_errors(repository: str, operation: str) -> Iterator[None]:
    """Envuelve PyMongoError en DatabaseError, conservando el error del driver."""
    try:
        yield
    except PyMongoError as exc:
        logger.error(
            f"{repository}: {operation} failed",
            extra={"error": str(exc), "error_type": type(exc).__name__},
        )
        raise DatabaseError(f"{operation} failed", original_error=exc) from exc
