"""
===============================================================================
TARJETA CRC — router.py (Router raíz / composición)
===============================================================================

Responsabilidades:
  - Construir el APIRouter raíz que incluye FastAPI (app.include_router).
  - Adjuntar las respuestas RFC7807 al OpenAPI.
  - Componer los routers por feature (users, catálogo, bookings, pagos,
    solicitudes de promoción).

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.*

Notas:
  - Se monta sin prefijo; el cliente llama a los paths en la raíz.
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers import (
    bookings_router,
    decorations_router,
    decorators_router,
    payments_router,
    promotions_router,
    users_router,
)


def build_router() -> APIRouter:
    """Construye el router raíz (invocable desde tests sin efectos de import)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(users_router)
    api_router.include_router(decorations_router)
    api_router.include_router(decorators_router)
    api_router.include_router(promotions_router)
    api_router.include_router(payments_router)
    api_router.include_router(bookings_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
