"""
===============================================================================
CRC CARD — identity/auth.py
===============================================================================

Módulo:
    Autenticación Bearer y guard de rol admin

Responsabilidades:
    - Extraer el token de `Authorization: Bearer <token>`.
    - Verificarlo con el IdentityVerifier configurado (Firebase / JWT).
    - Exponer dependencias de FastAPI:
        * require_principal(): 401 si falta o es rechazado.
        * require_admin(): require_principal + rol admin en el store (403).
    - Dejar el email verificado en el contexto de request para los logs.

Colaboradores:
    - container.get_identity_verifier / get_user_repository
    - domain.services.TokenVerificationError
    - crosscutting.error_responses: unauthorized / forbidden

Notas:
    - El rol se lee siempre del store de usuarios, nunca de los claims del
      token; un cambio de rol aplica en el request siguiente.
    - Nunca loguear tokens.
===============================================================================
"""

from __future__ import annotations

from typing import Callable

from fastapi import Header, Request
from starlette.concurrency import run_in_threadpool

from ..container import get_identity_verifier, get_user_repository
from ..context import set_principal_context
from ..crosscutting.error_responses import forbidden, unauthorized
from ..crosscutting.logger import logger
from ..domain.services import TokenVerificationError
from ..domain.value_objects import Principal


def _extract_bearer_token(authorization: str | None) -> str | None:
    """Extrae el token de `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


async def _authenticate(request: Request, authorization: str | None) -> Principal:
    token = _extract_bearer_token(authorization)
    if not token:
        raise unauthorized()

    verifier = get_identity_verifier()
    try:
        # Los SDKs del proveedor bloquean (descarga de certificados, reloj).
        principal = await run_in_threadpool(verifier.verify, token)
    except TokenVerificationError as exc:
        logger.info("Bearer token rejected", extra={"reason": str(exc)})
        raise unauthorized() from exc

    request.state.principal = principal
    set_principal_context(principal.email)
    return principal


def require_principal() -> Callable:
    """Dependencia FastAPI: exige un bearer token verificado."""

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> Principal:
        return await _authenticate(request, authorization)

    return dependency


def require_admin() -> Callable:
    """Dependencia FastAPI: caller verificado cuyo rol guardado es admin."""

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> Principal:
        principal = await _authenticate(request, authorization)
        user = await run_in_threadpool(
            get_user_repository().get_by_email, principal.email
        )
        if user is None or not user.is_admin:
            logger.warning(
                "Admin route denied", extra={"principal": principal.email}
            )
            raise forbidden()
        return principal

    return dependency
