"""
===============================================================================
USE CASES: Service listing management (create / update / delete)
===============================================================================

Rules:
    - name, category y description no pueden estar vacíos; price >= 0.
    - Update aplica solo los campos enviados; publicación inexistente ->
      NOT_FOUND.
    - Delete borra el documento; las reservas que la referencian conservan
      su decorationName/category denormalizados.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Dict

from ....domain.entities import DECORATION_MUTABLE_FIELDS, Decoration, utcnow
from ....domain.repositories import DecorationRepository
from .decoration_results import (
    DecorationError,
    DecorationErrorCode,
    DecorationResult,
    DeleteDecorationResult,
    decoration_not_found,
)

_TEXT_FIELDS = ("name", "category", "description")


def _validate(fields: Dict[str, Any]) -> str | None:
    for name in _TEXT_FIELDS:
        if name in fields and not str(fields[name] or "").strip():
            return f"{name} must not be blank"
    if "price" in fields:
        price = fields["price"]
        if price is None or price < 0:
            return "price must be a non-negative number"
    return None


def _validation(message: str) -> DecorationError:
    return DecorationError(code=DecorationErrorCode.VALIDATION_ERROR, message=message)


class CreateDecorationUseCase:
    def __init__(self, decoration_repository: DecorationRepository) -> None:
        self._decorations = decoration_repository

    def execute(self, decoration: Decoration) -> DecorationResult:
        problem = _validate(
            {
                "name": decoration.name,
                "category": decoration.category,
                "description": decoration.description,
                "price": decoration.price,
            }
        )
        if problem:
            return DecorationResult(error=_validation(problem))

        now = utcnow()
        decoration.created_at = now
        decoration.updated_at = now
        decoration_id = self._decorations.insert(decoration)
        return DecorationResult(decoration=self._decorations.get(decoration_id))


class UpdateDecorationUseCase:
    def __init__(self, decoration_repository: DecorationRepository) -> None:
        self._decorations = decoration_repository

    def execute(self, decoration_id: str, changes: Dict[str, Any]) -> DecorationResult:
        fields = {k: v for k, v in changes.items() if k in DECORATION_MUTABLE_FIELDS}
        if not fields:
            return DecorationResult(error=_validation("no updatable fields provided"))
        problem = _validate(fields)
        if problem:
            return DecorationResult(error=_validation(problem))

        if not self._decorations.update(decoration_id, fields):
            return DecorationResult(error=decoration_not_found(decoration_id))
        return DecorationResult(decoration=self._decorations.get(decoration_id))


class DeleteDecorationUseCase:
    def __init__(self, decoration_repository: DecorationRepository) -> None:
        self._decorations = decoration_repository

    def execute(self, decoration_id: str) -> DeleteDecorationResult:
        if not self._decorations.delete(decoration_id):
            return DeleteDecorationResult(error=decoration_not_found(decoration_id))
        return DeleteDecorationResult(deleted=True)
