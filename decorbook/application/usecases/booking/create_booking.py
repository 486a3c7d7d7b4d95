"""
===============================================================================
USE CASE: Create Booking (pre-payment route)
===============================================================================

Business Goal:
    Registrar una reserva directo desde el cliente, antes de que exista una
    sesión de pago (la ruta legacy /userBooks). El camino con pago de
    confirm_payment.py es el que crea reservas de forma autoritativa.

-------------------------------------------------------------------------------
BUSINESS RULES
-------------------------------------------------------------------------------
R1) decorationId, bookingDate, startTime, endTime y el email del cliente son
    obligatorios.
R2) Guard de duplicados: una reserva existente con exactamente la misma tupla
    (customer, decorationId, date, startTime, endTime) -> CONFLICT. Es una
    búsqueda puntual, no un chequeo de solapamiento; un minuto después se acepta.
R3) Las reservas nuevas arrancan con status=pending, payment_status=paid y sin
    decorador.
R4) Los campos extra del body se guardan, salvo los que pisan un campo de la
    reserva (transactionId, _id, status, ...) o parecen operadores.

Concurrency:
    El guard de duplicados es check-then-act. Dos requests idénticos
    concurrentes pueden pasar ambos la búsqueda.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ....crosscutting.metrics import record_booking_created
from ....domain.booking_policy import STATUS_PENDING
from ....domain.entities import PAYMENT_STATUS_PAID, Booking, utcnow
from ....domain.repositories import BookingRepository
from .booking_results import BookingError, BookingErrorCode, CreateBookingResult


@dataclass
class CreateBookingInput:
    decoration_id: str
    booking_date: str
    start_time: str
    end_time: str
    customer_email: str
    customer_name: Optional[str] = None
    decoration_name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


_REQUIRED = (
    ("decoration_id", "decorationId"),
    ("booking_date", "bookingDate"),
    ("start_time", "startTime"),
    ("end_time", "endTime"),
    ("customer_email", "userInfo.userEmail"),
)


class CreateBookingUseCase:
    def __init__(self, booking_repository: BookingRepository) -> None:
        self._bookings = booking_repository

    def execute(self, data: CreateBookingInput) -> CreateBookingResult:
        missing = [
            wire for attr, wire in _REQUIRED if not (getattr(data, attr) or "").strip()
        ]
        if missing:
            return CreateBookingResult(
                error=BookingError(
                    code=BookingErrorCode.VALIDATION_ERROR,
                    message=f"Invalid booking data: missing {', '.join(missing)}",
                )
            )

        customer_email = data.customer_email.strip()
        decoration_id = data.decoration_id.strip()

        existing = self._bookings.find_by_slot(
            customer_email=customer_email,
            decoration_id=decoration_id,
            booking_date=data.booking_date,
            start_time=data.start_time,
            end_time=data.end_time,
        )
        if existing is not None:
            return CreateBookingResult(
                error=BookingError(
                    code=BookingErrorCode.CONFLICT,
                    message="Already booked this decoration for this time slot",
                )
            )

        now = utcnow()
        booking = Booking(
            decoration_id=decoration_id,
            decoration_name=data.decoration_name,
            category=data.category,
            customer_email=customer_email,
            customer_name=data.customer_name,
            booking_date=data.booking_date,
            start_time=data.start_time,
            end_time=data.end_time,
            status=STATUS_PENDING,
            payment_status=PAYMENT_STATUS_PAID,
            price=data.price,
            assigned_decorator=None,
            division=data.division,
            district=data.district,
            phone=data.phone,
            created_at=now,
            booked_at=now,
            extra=dict(data.extra),
        )
        booking_id = self._bookings.insert(booking)
        record_booking_created("direct")
        return CreateBookingResult(booking_id=booking_id)
