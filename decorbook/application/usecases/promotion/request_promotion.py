"""
===============================================================================
USE CASE: Request Promotion (become a decorator)
===============================================================================

Business Rules:
R1) name, email, division, district y phone son obligatorios.
R2) Como mucho una solicitud activa por email: una pending o approved
    existente -> CONFLICT. Las rechazadas no bloquean una nueva.
R3) Las solicitudes nuevas arrancan con status=pending, requestedAt=now.

Concurrency:
    Check-then-act; dos envíos concurrentes para un email pueden pasar ambos.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ....domain.entities import ROLE_DECORATOR, PromotionRequest, utcnow
from ....domain.repositories import PromotionRequestRepository
from .promotion_results import (
    PromotionError,
    PromotionErrorCode,
    PromotionRequestResult,
)

_REQUIRED = ("name", "email", "division", "district", "phone")


@dataclass
class PromotionRequestInput:
    name: str | None
    email: str | None
    division: str | None
    district: str | None
    phone: str | None
    role: str | None = None


class RequestPromotionUseCase:
    def __init__(self, request_repository: PromotionRequestRepository) -> None:
        self._requests = request_repository

    def execute(self, data: PromotionRequestInput) -> PromotionRequestResult:
        missing = [f for f in _REQUIRED if not (getattr(data, f) or "").strip()]
        if missing:
            return PromotionRequestResult(
                error=PromotionError(
                    code=PromotionErrorCode.VALIDATION_ERROR,
                    message=f"Missing required fields: {', '.join(missing)}",
                )
            )

        email = (data.email or "").strip()
        if self._requests.find_active_by_email(email) is not None:
            return PromotionRequestResult(
                error=PromotionError(
                    code=PromotionErrorCode.CONFLICT,
                    message="A decorator request for this email already exists",
                    resource=email,
                )
            )

        request = PromotionRequest(
            name=(data.name or "").strip(),
            email=email,
            division=(data.division or "").strip(),
            district=(data.district or "").strip(),
            phone=(data.phone or "").strip(),
            role=data.role or ROLE_DECORATOR,
            requested_at=utcnow(),
        )
        request_id = self._requests.insert(request)
        return PromotionRequestResult(request=self._requests.get(request_id))
