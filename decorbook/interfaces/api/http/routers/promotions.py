"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/promotions.py
===============================================================================

Name:
    Decorator Promotion Requests Router

Responsibilities:
    - Enviar y listar solicitudes de promoción.
    - Aprobar (workflow en dos pasos, ver ApprovePromotionRequestUseCase).
    - Rechazar (admin).
    - Traducir PromotionError -> RFC7807.

Notes:
    - Aprobar no exige token; rechazar requiere admin.
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from .....application.usecases import (
    ApprovePromotionRequestUseCase,
    ListPromotionRequestsUseCase,
    RejectPromotionRequestUseCase,
    RequestPromotionUseCase,
)
from .....container import (
    get_approve_promotion_request_use_case,
    get_list_promotion_requests_use_case,
    get_reject_promotion_request_use_case,
    get_request_promotion_use_case,
)
from .....domain.value_objects import Principal
from .....identity.auth import require_admin
from ..error_mapping import raise_promotion_error
from ..schemas.promotions import PromotionRequestReq, PromotionRequestRes

router = APIRouter(tags=["decorator-requests"])


@router.post("/decorator-requests", response_model=PromotionRequestRes)
def request_promotion(
    req: PromotionRequestReq,
    use_case: RequestPromotionUseCase = Depends(get_request_promotion_use_case),
):
    result = use_case.execute(req.to_input())
    if result.error is not None:
        raise_promotion_error(result.error)
    return PromotionRequestRes.from_entity(result.request)


@router.get("/decorator-requests", response_model=list[PromotionRequestRes])
def list_promotion_requests(
    status: str | None = Query(None),
    use_case: ListPromotionRequestsUseCase = Depends(
        get_list_promotion_requests_use_case
    ),
):
    result = use_case.execute(status=status)
    return [PromotionRequestRes.from_entity(r) for r in result.requests]


@router.patch(
    "/decorator-requests/approve/{request_id}", response_model=PromotionRequestRes
)
def approve_promotion_request(
    request_id: str,
    use_case: ApprovePromotionRequestUseCase = Depends(
        get_approve_promotion_request_use_case
    ),
):
    result = use_case.execute(request_id)
    if result.error is not None:
        raise_promotion_error(result.error)
    return PromotionRequestRes.from_entity(result.request)


@router.patch(
    "/decorator-requests/reject/{request_id}", response_model=PromotionRequestRes
)
def reject_promotion_request(
    request_id: str,
    _admin: Principal = Depends(require_admin()),
    use_case: RejectPromotionRequestUseCase = Depends(
        get_reject_promotion_request_use_case
    ),
):
    result = use_case.execute(request_id)
    if result.error is not None:
        raise_promotion_error(result.error)
    return PromotionRequestRes.from_entity(result.request)
