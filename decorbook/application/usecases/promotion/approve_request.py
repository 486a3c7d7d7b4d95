"""
===============================================================================
USE CASE: Approve Promotion Request (two-step workflow)
===============================================================================

Business Goal:
    Aceptar la postulación de un usuario y convertirlo en decorador
    disponible.

-------------------------------------------------------------------------------
FLOW
-------------------------------------------------------------------------------
1) Cargar la solicitud; si no existe -> NOT_FOUND.
2) Escritura primaria: solicitud status=approved, approvedAt=now.
3) Follow-up: el usuario con el email de la solicitud pasa a role=decorator,
   work_Status=available, phone/division/district de la solicitud,
   updatedAt=now. Con retry ante errores transitorios; una falla final se
   propaga (HTTP 500) y aprobar de nuevo vuelve a aplicar ambas escrituras.

Notes:
    - Aprobar una solicitud ya aprobada se acepta y re-sincroniza al usuario.
    - Sin usuario con ese email: la solicitud queda aprobada y se loguea un
      warning (el usuario puede loguearse después; aprobar de nuevo lo
      sincroniza).
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from ....domain.entities import utcnow
from ....domain.repositories import PromotionRequestRepository, UserRepository
from ..workflow import RetryPolicy, run_followup
from .promotion_results import (
    PromotionError,
    PromotionErrorCode,
    PromotionRequestResult,
)

logger = logging.getLogger(__name__)

FOLLOWUP_STEP = "approve_request.promote_user"


class ApprovePromotionRequestUseCase:
    def __init__(
        self,
        request_repository: PromotionRequestRepository,
        user_repository: UserRepository,
        *,
        followup_retry: Optional[RetryPolicy] = None,
    ) -> None:
        self._requests = request_repository
        self._users = user_repository
        self._retry = followup_retry

    def execute(self, request_id: str) -> PromotionRequestResult:
        request = self._requests.get(request_id)
        if request is None:
            return PromotionRequestResult(
                error=PromotionError(
                    code=PromotionErrorCode.NOT_FOUND,
                    message="Decorator request not found",
                    resource=request_id,
                )
            )

        now = utcnow()
        self._requests.mark_approved(request_id, now)

        promoted = run_followup(
            FOLLOWUP_STEP,
            lambda: self._users.promote_to_decorator(
                request.email,
                phone=request.phone,
                division=request.division,
                district=request.district,
                at=now,
            ),
            retry=self._retry,
            context={"promotion_request_id": request_id, "email": request.email},
        )
        if not promoted:
            logger.warning(
                "Approved decorator request has no matching user",
                extra={"promotion_request_id": request_id, "email": request.email},
            )

        return PromotionRequestResult(request=self._requests.get(request_id))
