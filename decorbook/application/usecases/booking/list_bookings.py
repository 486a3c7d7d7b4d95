"""
USE CASES: Booking listings (read side)

- ListPendingBookingsUseCase: cola del admin con reservas esperando decorador.
- ListCustomerBookingsUseCase: reservas de un cliente, más nuevas primero.
- ListAssignedBookingsUseCase: reservas asignadas a un email de decorador,
  opcionalmente filtradas por estado.
"""

from __future__ import annotations

from ....domain.booking_policy import STATUS_PENDING
from ....domain.repositories import BookingRepository
from .booking_results import BookingError, BookingErrorCode, BookingListResult


def _email_required() -> BookingListResult:
    return BookingListResult(
        error=BookingError(
            code=BookingErrorCode.VALIDATION_ERROR, message="email is required"
        )
    )


class ListPendingBookingsUseCase:
    def __init__(self, booking_repository: BookingRepository) -> None:
        self._bookings = booking_repository

    def execute(self) -> BookingListResult:
        return BookingListResult(bookings=self._bookings.list_by_status(STATUS_PENDING))


class ListCustomerBookingsUseCase:
    def __init__(self, booking_repository: BookingRepository) -> None:
        self._bookings = booking_repository

    def execute(self, customer_email: str) -> BookingListResult:
        if not customer_email:
            return _email_required()
        return BookingListResult(
            bookings=self._bookings.list_by_customer(customer_email)
        )


class ListAssignedBookingsUseCase:
    def __init__(self, booking_repository: BookingRepository) -> None:
        self._bookings = booking_repository

    def execute(
        self, decorator_email: str | None, *, status: str | None = None
    ) -> BookingListResult:
        if not decorator_email:
            return _email_required()
        return BookingListResult(
            bookings=self._bookings.list_by_decorator_email(
                decorator_email, status=status or None
            )
        )
