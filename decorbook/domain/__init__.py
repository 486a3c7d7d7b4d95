"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exports de la capa de dominio

Responsabilidades:
    - Centralizar exports para imports limpios desde application/interfaces.
    - Mantener estable la superficie del dominio.

Reglas:
    - Re-exportar solo contratos/entidades del dominio.
    - Sin imports de infraestructura.
===============================================================================
"""

from .entities import AssignedDecorator, Booking, Decoration, PromotionRequest, User
from .repositories import (
    BookingRepository,
    DecorationRepository,
    DuplicateTransactionError,
    PromotionRequestRepository,
    UserRepository,
)
from .services import IdentityVerifier, PaymentGateway, TokenVerificationError
from .value_objects import CheckoutRequest, CheckoutSession, Principal

__all__ = [
    # Entidades
    "User",
    "Decoration",
    "Booking",
    "AssignedDecorator",
    "PromotionRequest",
    # Repositorios
    "UserRepository",
    "DecorationRepository",
    "BookingRepository",
    "PromotionRequestRepository",
    "DuplicateTransactionError",
    # Servicios
    "IdentityVerifier",
    "PaymentGateway",
    "TokenVerificationError",
    # Objetos de valor
    "Principal",
    "CheckoutRequest",
    "CheckoutSession",
]
