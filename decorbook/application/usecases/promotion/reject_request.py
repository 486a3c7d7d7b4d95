"""
USE CASE: Reject Promotion Request

Setea status=rejected y rejectedAt=now. El usuario no se toca.
"""

from __future__ import annotations

from ....domain.entities import utcnow
from ....domain.repositories import PromotionRequestRepository
from .promotion_results import (
    PromotionError,
    PromotionErrorCode,
    PromotionRequestResult,
)


class RejectPromotionRequestUseCase:
    def __init__(self, request_repository: PromotionRequestRepository) -> None:
        self._requests = request_repository

    def execute(self, request_id: str) -> PromotionRequestResult:
        if not self._requests.mark_rejected(request_id, utcnow()):
            return PromotionRequestResult(
                error=PromotionError(
                    code=PromotionErrorCode.NOT_FOUND,
                    message="Decorator request not found",
                    resource=request_id,
                )
            )
        return PromotionRequestResult(request=self._requests.get(request_id))
