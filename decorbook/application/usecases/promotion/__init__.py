"""
Casos de uso del workflow de promoción a decorador.
"""

from .approve_request import ApprovePromotionRequestUseCase
from .list_requests import ListPromotionRequestsUseCase
from .promotion_results import (
    PromotionError,
    PromotionErrorCode,
    PromotionRequestListResult,
    PromotionRequestResult,
)
from .reject_request import RejectPromotionRequestUseCase
from .request_promotion import PromotionRequestInput, RequestPromotionUseCase

__all__ = [
    "PromotionError",
    "PromotionErrorCode",
    "PromotionRequestResult",
    "PromotionRequestListResult",
    "PromotionRequestInput",
    "RequestPromotionUseCase",
    "ApprovePromotionRequestUseCase",
    "RejectPromotionRequestUseCase",
    "ListPromotionRequestsUseCase",
]
