"""
===============================================================================
CRC CARD — decorbook/context.py (Contexto por request)
===============================================================================

Responsabilidades:
  - Guardar el contexto de cada request en ContextVars (async-safe).
  - Permitir que logs y métricas correlacionen por request id sin pasarlo por
    cada llamada.
  - Proveer helpers mínimos: set_request_context(), get_context_dict(),
    clear_context().

Colaboradores:
  - decorbook.crosscutting.middleware: setea request_id/method/path por request.
  - decorbook.crosscutting.logger: enriquece los logs vía get_context_dict().

Restricciones:
  - Solo valores primitivos (str) para que todo serialice a JSON.
  - Defaults en string vacío en lugar de None.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Final

# Identificador de request (UUID o el X-Request-Id que manda el cliente).
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Metadata HTTP básica para los logs.
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")

# Email del principal verificado (lo setean las dependencias de identidad).
principal_email_var: ContextVar[str] = ContextVar("principal_email", default="")

_CTX_REQUEST_ID: Final[str] = "request_id"
_CTX_METHOD: Final[str] = "method"
_CTX_PATH: Final[str] = "path"
_CTX_PRINCIPAL: Final[str] = "principal"


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    """Setea el contexto mínimo. String vacío significa "no disponible"."""
    request_id_var.set(request_id or "")
    http_method_var.set(method or "")
    http_path_var.set(path or "")


def set_principal_context(email: str) -> None:
    principal_email_var.set(email or "")


def get_context_dict() -> dict[str, str]:
    """Devuelve el contexto actual como dict, sin las claves vacías."""
    ctx: dict[str, str] = {}

    if val := request_id_var.get():
        ctx[_CTX_REQUEST_ID] = val
    if val := http_method_var.get():
        ctx[_CTX_METHOD] = val
    if val := http_path_var.get():
        ctx[_CTX_PATH] = val
    if val := principal_email_var.get():
        ctx[_CTX_PRINCIPAL] = val

    return ctx


def clear_context() -> None:
    """Resetea el contexto al final del request para que nada se filtre."""
    request_id_var.set("")
    http_method_var.set("")
    http_path_var.set("")
    principal_email_var.set("")
