"""
===============================================================================
USE CASE: Update Booking Status
===============================================================================

Rules:
    - El estado destino tiene que ser uno de los estados conocidos.
    - Transiciones abiertas: cualquier estado conocido puede pasar a otro
      (completed -> pending se acepta).
    - Reserva inexistente -> NOT_FOUND.
    - Setea status y updatedAt.
===============================================================================
"""

from __future__ import annotations

from ....domain.booking_policy import BOOKING_STATUSES, can_transition
from ....domain.entities import utcnow
from ....domain.repositories import BookingRepository
from .booking_results import BookingError, BookingErrorCode, BookingResult


class UpdateBookingStatusUseCase:
    def __init__(self, booking_repository: BookingRepository) -> None:
        self._bookings = booking_repository

    def execute(self, booking_id: str, status: str | None) -> BookingResult:
        booking = self._bookings.get(booking_id)
        if booking is None:
            return BookingResult(
                error=BookingError(
                    code=BookingErrorCode.NOT_FOUND,
                    message="Booking not found",
                    resource=booking_id,
                )
            )

        if not status or not can_transition(booking.status, status):
            return BookingResult(
                error=BookingError(
                    code=BookingErrorCode.VALIDATION_ERROR,
                    message=f"status must be one of: {', '.join(BOOKING_STATUSES)}",
                )
            )

        if not self._bookings.update_status(booking_id, status, utcnow()):
            return BookingResult(
                error=BookingError(
                    code=BookingErrorCode.NOT_FOUND,
                    message="Booking not found",
                    resource=booking_id,
                )
            )
        return BookingResult(booking=self._bookings.get(booking_id))
