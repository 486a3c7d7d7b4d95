"""
DECORATION (SERVICE LISTING) USE CASE RESULTS
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import Decoration


class DecorationErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class DecorationError:
    code: DecorationErrorCode
    message: str
    resource: str | None = None


@dataclass
class DecorationResult:
    decoration: Decoration | None = None
    error: DecorationError | None = None


@dataclass
class DecorationListResult:
    decorations: List[Decoration] = field(default_factory=list)
    error: DecorationError | None = None


@dataclass
class DeleteDecorationResult:
    deleted: bool = False
    error: DecorationError | None = None


def decoration_not_found(decoration_id: str) -> DecorationError:
    return DecorationError(
        code=DecorationErrorCode.NOT_FOUND,
        message="Decoration not found",
        resource=decoration_id,
    )
