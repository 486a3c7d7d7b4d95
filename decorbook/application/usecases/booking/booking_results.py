"""
===============================================================================
BOOKING USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Booking Use Case Results

Business Goal:
    Modelos compartidos de resultados y errores para los casos de uso del
    workflow de reservas (alta, checkout, confirmación de pago, asignación,
    cambios de estado, cancelación y disponibilidad), con un contrato
    explícito para:
      - validaciones
      - documentos inexistentes
      - reservas duplicadas

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar
      excepciones hacia la capa HTTP: routers finos y flujos fáciles de testear.
    - Las fallas de infraestructura (store, proveedor de pagos) NO se modelan
      acá; se propagan como DatabaseError / PaymentGatewayError.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    booking_results models (module)

Responsibilities:
    - Definir el set BookingErrorCode.
    - Representar BookingError (code + message).
    - Representar los resultados de cada comando.

Collaborators:
    - domain.entities.Booking, User
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import Booking, User


class BookingErrorCode(str, Enum):
    """
    Códigos de error de los casos de uso de reservas.

    Codes:
      - VALIDATION_ERROR: inputs faltantes o inválidos.
      - NOT_FOUND: no existe la reserva, el decorador, la publicación o la sesión.
      - CONFLICT: ya existe exactamente ese turno de reserva.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class BookingError:
    code: BookingErrorCode
    message: str
    resource: str | None = None


@dataclass
class BookingResult:
    """
    Resultado de los casos de uso que devuelven una sola Booking.

    Contract:
      - error es None => booking está presente
      - error está seteado => booking es None
    """

    booking: Booking | None = None
    error: BookingError | None = None


@dataclass
class BookingListResult:
    bookings: List[Booking] = field(default_factory=list)
    error: BookingError | None = None


@dataclass
class CreateBookingResult:
    booking_id: str | None = None
    error: BookingError | None = None


@dataclass
class CheckoutSessionResult:
    url: str | None = None
    error: BookingError | None = None


@dataclass
class ConfirmPaymentResult:
    """
    Resultado de una confirmación de pago.

    created es True solo en la llamada que insertó la reserva; confirmar
    de nuevo la misma sesión responde OK con created=False.
    """

    created: bool = False
    booking_id: str | None = None
    transaction_id: str | None = None
    outcome: str | None = None
    error: BookingError | None = None


@dataclass
class AvailabilityResult:
    available: bool = False
    decorators: List[User] = field(default_factory=list)
