"""
USE CASE: Cancel Booking

Busca la reserva por transactionId (no por id de reserva) y setea
status=cancelled y cancelledAt=now. No se pide reembolso al proveedor de
pagos; cancelar es solo un cambio de estado local.
"""

from __future__ import annotations

from ....domain.booking_policy import STATUS_CANCELLED
from ....domain.entities import utcnow
from ....domain.repositories import BookingRepository
from .booking_results import BookingError, BookingErrorCode, BookingResult


class CancelBookingUseCase:
    def __init__(self, booking_repository: BookingRepository) -> None:
        self._bookings = booking_repository

    def execute(self, transaction_id: str) -> BookingResult:
        cancelled = bool(transaction_id) and self._bookings.cancel_by_transaction_id(
            transaction_id, status=STATUS_CANCELLED, at=utcnow()
        )
        if not cancelled:
            return BookingResult(
                error=BookingError(
                    code=BookingErrorCode.NOT_FOUND,
                    message="Booking not found",
                    resource=transaction_id,
                )
            )
        return BookingResult(
            booking=self._bookings.find_by_transaction_id(transaction_id)
        )
