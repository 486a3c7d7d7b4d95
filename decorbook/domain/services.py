"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de servicios externos (Protocols)

Responsabilidades:
    - IdentityVerifier: bearer token -> Principal verificado.
    - PaymentGateway: abrir una sesión de checkout y volver a leerla.
    - Mantener la capa de aplicación libre de tipos de los SDK de Firebase/Stripe.

Colaboradores:
    - infrastructure/services/*: adapters concretos.
    - identity/auth.py, application/usecases/booking: consumidores.

Reglas:
    - Solo interfaces.
===============================================================================
"""

from __future__ import annotations

from typing import Optional, Protocol

from .value_objects import CheckoutRequest, CheckoutSession, Principal


class TokenVerificationError(Exception):
    """El bearer token falta, está mal formado, expiró o fue rechazado."""


class IdentityVerifier(Protocol):
    """Contrato para verificar bearer tokens."""

    def verify(self, token: str) -> Principal:
        """
        Raises:
            TokenVerificationError: el proveedor rechazó el token.
        """
        ...


class PaymentGateway(Protocol):
    """Contrato del proveedor de checkout hosteado."""

    def create_checkout_session(self, request: CheckoutRequest) -> str:
        """Abre una sesión y devuelve la URL de redirección."""
        ...

    def retrieve_session(self, session_id: str) -> Optional[CheckoutSession]:
        """Resultado de la sesión, o None si el proveedor no conoce el id."""
        ...
