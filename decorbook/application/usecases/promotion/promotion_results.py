"""
PROMOTION REQUEST USE CASE RESULTS

Resultados tipados del workflow de promoción (request, approve, reject, list).
Códigos: VALIDATION_ERROR (faltan campos), NOT_FOUND (solicitud inexistente),
CONFLICT (ya hay una solicitud activa para el email).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import PromotionRequest


class PromotionErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class PromotionError:
    code: PromotionErrorCode
    message: str
    resource: str | None = None


@dataclass
class PromotionRequestResult:
    request: PromotionRequest | None = None
    error: PromotionError | None = None


@dataclass
class PromotionRequestListResult:
    requests: List[PromotionRequest] = field(default_factory=list)
    error: PromotionError | None = None
