"""
===============================================================================
MÓDULO: Excepciones internas tipadas
===============================================================================

Los errores internos llevan:
- un error_code estable
- un error_id para correlacionar con logs
- un mensaje humano (sin secretos)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  PlatformError + subclases

Responsabilidades:
  - Estandarizar fallas de infraestructura que luego se mapean a HTTP 500
  - Conservar la excepción original del driver/SDK para clasificar retries

Colaboradores:
  - api/exception_handlers.py (mapea a AppHTTPException)
  - infrastructure/services/retry.py (inspecciona original_error)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class PlatformError(Exception):
    """Base de las fallas internas de la plataforma de reservas."""

    error_code: str = "PLATFORM_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(PlatformError):
    """Fallas del document store (conexión, query, timeout)."""

    error_code: str = "DATABASE_ERROR"


class PaymentGatewayError(PlatformError):
    """Fallas del proveedor de pagos (red, request inválido, auth)."""

    error_code: str = "PAYMENT_GATEWAY_ERROR"


class IdentityProviderError(PlatformError):
    """Proveedor de identidad mal configurado o caído (no un token inválido)."""

    error_code: str = "IDENTITY_PROVIDER_ERROR"
