"""
===============================================================================
MÓDULO: Middlewares HTTP (contexto de request)
===============================================================================

RequestContextMiddleware:
  - Generar o propagar el request id (X-Request-Id)
  - Setear contextvars (method/path) para correlacionar logs
  - Emitir una línea de log y métricas HTTP por request

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Colaboradores:
  - decorbook/context.py
  - crosscutting/metrics.py
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..context import clear_context, set_request_context
from .logger import logger
from .metrics import record_request_metrics

_MAX_REQUEST_ID_LENGTH = 128


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Acepta o genera X-Request-Id, carga el contexto de request y siempre lo
    limpia a la salida para que nada se filtre entre requests.
    """

    _QUIET_PATHS = {"/healthz", "/readyz", "/metrics"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = (request.headers.get("x-request-id") or "").strip()
        request_id = (
            incoming if self._is_valid_request_id(incoming) else str(uuid.uuid4())
        )

        set_request_context(
            request_id=request_id, method=request.method, path=request.url.path
        )
        request.state.request_id = request_id

        start = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-Id"] = request_id
            return response
        except Exception:
            latency = time.perf_counter() - start
            logger.exception(
                "request failed",
                extra={"status_code": 500, "latency_ms": round(latency * 1000, 2)},
            )
            raise
        finally:
            latency = time.perf_counter() - start
            record_request_metrics(
                endpoint=request.url.path,
                method=request.method,
                status_code=status_code,
                latency_seconds=latency,
            )

            if request.url.path not in self._QUIET_PATHS:
                logger.info(
                    "request completed",
                    extra={
                        "status_code": status_code,
                        "latency_ms": round(latency * 1000, 2),
                    },
                )

            clear_context()

    @staticmethod
    def _is_valid_request_id(value: str) -> bool:
        return bool(value) and len(value) <= _MAX_REQUEST_ID_LENGTH
