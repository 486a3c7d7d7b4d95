"""
===============================================================================
TWO-STEP WORKFLOW SUPPORT
===============================================================================

Name:
    Follow-up write runner

Business Goal:
    La asignación de decorador y la aprobación de promociones tocan dos
    documentos (booking + user, request + user) y el store no ofrece acá una
    transacción multi-documento. Se ejecutan como:
      1) escritura primaria (booking / request)
      2) escritura follow-up (user), con retry ante fallas transitorias

    Ambas escrituras son updates "$set" idempotentes: repetir el mismo
    comando después de una falla vuelve a aplicar las dos y converge.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Function:
    run_followup(step, action, retry, context)

Responsibilities:
    - Aplicar la política de retry (si hay) a la acción follow-up.
    - Si falla definitivamente: loguear con ambos ids, contar la falla y
      re-lanzar.

Collaborators:
    - infrastructure.services.retry.create_retry_decorator (inyectado)
    - crosscutting.metrics.record_followup_failure
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from ...crosscutting.metrics import record_followup_failure

logger = logging.getLogger(__name__)

T = TypeVar("T")

RetryPolicy = Callable[[Callable[[], T]], Callable[[], T]]


def run_followup(
    step: str,
    action: Callable[[], T],
    *,
    retry: Optional[RetryPolicy] = None,
    context: Optional[Dict[str, Any]] = None,
) -> T:
    """Ejecuta la escritura follow-up de un workflow de dos pasos."""
    call = retry(action) if retry is not None else action
    try:
        return call()
    except Exception:
        record_followup_failure(step)
        logger.exception(
            "Follow-up write failed after primary write succeeded",
            extra={"step": step, **(context or {})},
        )
        raise
