from __future__ import annotations

from ....domain.repositories import PromotionRequestRepository
from .promotion_results import PromotionRequestListResult


class ListPromotionRequestsUseCase:
    """Lista solicitudes de promoción, opcionalmente filtradas por status."""

    def __init__(self, request_repository: PromotionRequestRepository) -> None:
        self._requests = request_repository

    def execute(self, *, status: str | None = None) -> PromotionRequestListResult:
        return PromotionRequestListResult(
            requests=self._requests.list_requests(status=status or None)
        )
