"""
===============================================================================
CRC CARD — decorbook/api/exception_handlers.py (Manejo centralizado de excepciones)
===============================================================================

Responsabilidades:
  - Traducir excepciones de la aplicación a respuestas HTTP RFC7807.
  - Loguear fallas con request_id + error_id.
  - No exponer detalles internos en errores no tipados.

Mapeo:
  - DatabaseError          -> 500 DATABASE_ERROR
  - PaymentGatewayError    -> 500 GATEWAY_ERROR
  - IdentityProviderError  -> 500 INTERNAL_ERROR
  - PlatformError (base)   -> 500 INTERNAL_ERROR
  - RequestValidationError -> 400 VALIDATION_ERROR (con errores por campo)
  - AppHTTPException       -> su propio status / code
  - Exception              -> 500 INTERNAL_ERROR ("Server Error")

Colaboradores:
  - crosscutting.error_responses: AppHTTPException, ErrorCode, problem_response
  - crosscutting.exceptions: PlatformError y subclases
===============================================================================
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    problem_response,
)
from ..crosscutting.exceptions import (
    DatabaseError,
    IdentityProviderError,
    PaymentGatewayError,
    PlatformError,
)
from ..crosscutting.logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def _handle_platform_error(
    request: Request,
    *,
    exc: PlatformError,
    code: ErrorCode,
    status_code: int = 500,
) -> JSONResponse:
    request_id = _request_id_from(request)

    logger.error(
        "Service error",
        extra={
            "code": code.value,
            "error_id": exc.error_id,
            "error": exc.message,
            "cause": repr(exc.original_error) if exc.original_error else None,
            "request_id": request_id,
        },
    )

    app_exc = AppHTTPException(
        status_code=status_code,
        code=code,
        detail=exc.message,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    return await _handle_platform_error(
        request, exc=exc, code=ErrorCode.DATABASE_ERROR
    )


async def payment_gateway_error_handler(
    request: Request, exc: PaymentGatewayError
) -> JSONResponse:
    return await _handle_platform_error(request, exc=exc, code=ErrorCode.GATEWAY_ERROR)


async def identity_provider_error_handler(
    request: Request, exc: IdentityProviderError
) -> JSONResponse:
    return await _handle_platform_error(
        request, exc=exc, code=ErrorCode.INTERNAL_ERROR
    )


async def platform_error_handler(request: Request, exc: PlatformError) -> JSONResponse:
    return await _handle_platform_error(
        request, exc=exc, code=ErrorCode.INTERNAL_ERROR
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {
            "loc": list(err.get("loc", ())),
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in jsonable_encoder(exc.errors())
    ]


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Bodies / params mal formados son errores del cliente (400)."""
    return problem_response(
        request,
        status_code=400,
        code=ErrorCode.VALIDATION_ERROR,
        detail="Invalid request data",
        errors=_field_errors(exc),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Fallback para excepciones no tipadas.

    - Log completo con stacktrace.
    - Body de respuesta genérico.
    """
    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra={"request_id": _request_id_from(request), "error": str(exc)},
    )
    return problem_response(
        request,
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail="Server Error",
    )


def register_exception_handlers(app) -> None:
    """
    Registra los handlers en la app FastAPI.

    Subclases antes que PlatformError; Exception al final como fallback.
    """
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(PaymentGatewayError, payment_gateway_error_handler)
    app.add_exception_handler(IdentityProviderError, identity_provider_error_handler)
    app.add_exception_handler(PlatformError, platform_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
