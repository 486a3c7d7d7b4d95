"""
===============================================================================
MÓDULO: Respuestas de error estándar (RFC 7807 / Problem Details)
===============================================================================

Todo error HTTP sale de la API como problem+json para que:
- El frontend pueda decidir según "code"
- Operaciones pueda correlacionar por request_id
- Los clientes existentes sigan leyendo el campo "message"

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  AppHTTPException + handlers

Responsabilidades:
  - Definir el catálogo de códigos de error (ErrorCode)
  - Construir el payload RFC 7807 (ErrorDetail)
  - Proveer factories para errores frecuentes
  - Proveer handlers de FastAPI que devuelven problem+json

Colaboradores:
  - crosscutting/middleware.py (request_id)
  - api/exception_handlers.py (mapea errores internos)
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorCode(str, Enum):
    # 4xx
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"

    # 5xx
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    GATEWAY_ERROR = "GATEWAY_ERROR"


class ErrorDetail(BaseModel):
    """
    Modelo RFC 7807 (Problem Details).

    Campos extra:
    - code: código de error estable para clientes
    - message: copia de detail, la leen los clientes web existentes
    - errors: lista opcional de detalles (ej. [{"field": "x", "msg": "..."}])
    """

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    message: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None


PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

_OPENAPI_ERROR_CONTENT = {
    PROBLEM_JSON_MEDIA_TYPE: {"schema": {"$ref": "#/components/schemas/ErrorDetail"}}
}


def _openapi_entry(description: str) -> dict[str, Any]:
    return {
        "description": f"{description} (RFC7807)",
        "model": ErrorDetail,
        "content": _OPENAPI_ERROR_CONTENT,
    }


OPENAPI_ERROR_RESPONSES = {
    "400": _openapi_entry("Bad Request"),
    "401": _openapi_entry("Unauthorized"),
    "403": _openapi_entry("Forbidden"),
    "404": _openapi_entry("Not Found"),
    "409": _openapi_entry("Conflict"),
    "default": _openapi_entry("Error"),
}


class AppHTTPException(HTTPException):
    """HTTPException con un ErrorCode estable y detalles de validación opcionales."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code
        self.errors = errors


# ---------------------------------------------------------------------------
# Factories de errores
# ---------------------------------------------------------------------------
def validation_error(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.VALIDATION_ERROR, detail, errors)


def not_found(detail: str = "Not found") -> AppHTTPException:
    return AppHTTPException(404, ErrorCode.NOT_FOUND, detail)


def conflict(detail: str) -> AppHTTPException:
    return AppHTTPException(409, ErrorCode.CONFLICT, detail)


def unauthorized(detail: str = "Unauthorized Access!") -> AppHTTPException:
    return AppHTTPException(401, ErrorCode.UNAUTHORIZED, detail)


def forbidden(detail: str = "Forbidden Access!") -> AppHTTPException:
    return AppHTTPException(403, ErrorCode.FORBIDDEN, detail)


def internal_error(detail: str = "Server Error") -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)


# ---------------------------------------------------------------------------
# Handlers de FastAPI
# ---------------------------------------------------------------------------
def _request_id_errors(
    request: Request, errors: list[dict[str, Any]] | None = None
) -> list[dict[str, Any]] | None:
    request_id = getattr(getattr(request, "state", None), "request_id", None)
    out = list(errors or [])
    if request_id:
        out.append({"request_id": request_id})
    return out or None


def problem_response(
    request: Request,
    *,
    status_code: int,
    code: ErrorCode,
    detail: str,
    errors: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Arma una respuesta problem+json para el código y detalle dados."""
    error = ErrorDetail(
        type=f"about:blank/{code.value.lower()}",
        title=code.value.replace("_", " ").title(),
        status=status_code,
        detail=detail,
        message=detail,
        code=code,
        instance=str(request.url),
        errors=_request_id_errors(request, errors),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(mode="json", exclude_none=True),
        headers=headers,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )


async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    """Handler para AppHTTPException; propaga headers opcionales."""
    return problem_response(
        request,
        status_code=exc.status_code,
        code=exc.code,
        detail=str(exc.detail),
        errors=exc.errors,
        headers=getattr(exc, "headers", None),
    )
